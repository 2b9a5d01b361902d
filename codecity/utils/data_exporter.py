"""Module for exporting city layouts to JSON.

This module provides functionality to export the buildings, districts and roads of a
layout in the camelCase shape the renderer consumes.
"""
import json
import os
from typing import Dict

from codecity.citygen.dataclass import CityLayout


def _round_floats(data, ndigits: int = 4):
    if isinstance(data, float):
        return round(data, ndigits)
    if isinstance(data, dict):
        return {k: _round_floats(v, ndigits) for k, v in data.items()}
    if isinstance(data, list):
        return [_round_floats(v, ndigits) for v in data]
    return data


class DataExporter:
    """Manages the export of a city layout to structured data.

    Floats are rounded to 4 decimal places.
    """
    def __init__(self, layout: CityLayout):
        """Initialize the data exporter with a layout.

        Args:
            layout: The city layout to export.
        """
        self.layout = layout

    def export_building_data(self) -> Dict:
        """Export all building data.

        Returns:
            Dictionary containing building data.
        """
        return {'buildings': _round_floats([b.to_dict() for b in self.layout.buildings])}

    def export_district_data(self) -> Dict:
        """Export all district data.

        Returns:
            Dictionary containing district data.
        """
        return {'districts': _round_floats([d.to_dict() for d in self.layout.districts])}

    def export_road_data(self) -> Dict:
        """Export all road data.

        Returns:
            Dictionary containing road segment data.
        """
        return {'roads': _round_floats([r.to_dict() for r in self.layout.roads])}

    def export_layout(self) -> Dict:
        """Export the whole layout as one document.

        Returns:
            Dictionary with buildings, districts, roads and gridSize.
        """
        data = {}
        data.update(self.export_building_data())
        data.update(self.export_district_data())
        data.update(self.export_road_data())
        data['gridSize'] = round(self.layout.grid_size, 4)
        return data

    def export_to_json(self, output_path: str) -> None:
        """Export the layout to a JSON file, creating parent directories as needed.

        Args:
            output_path: Path of the JSON file to write.
        """
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.export_layout(), f, indent=2)
