"""Building classifier module: archetype, setback and roof selection.

`classify` is a pure function of height and width. Roof and setback choices are
random draws taken from the generator passed in by the caller, never from the
process-wide random state.
"""
import random
from dataclasses import dataclass
from typing import Dict, Mapping

from codecity.citygen.dataclass import BuildingType, RoofType
from codecity.utils.math_utils import MathUtils

SKYSCRAPER_HEIGHT = 18
TOWER_HEIGHT = 10
TOWER_MAX_WIDTH = 1.8
OFFICE_HEIGHT = 4
LOW_RISE_HEIGHT = 1.5

DEFAULT_ROOF_DISTRIBUTIONS: Dict[BuildingType, Dict[RoofType, float]] = {
    BuildingType.SKYSCRAPER: {
        RoofType.ANTENNA: 0.35,
        RoofType.HELIPAD: 0.20,
        RoofType.MECHANICAL: 0.20,
        RoofType.FLAT: 0.25,
    },
    BuildingType.TOWER: {
        RoofType.ANTENNA: 0.30,
        RoofType.MECHANICAL: 0.20,
        RoofType.FLAT: 0.50,
    },
    BuildingType.OFFICE: {
        RoofType.MECHANICAL: 0.25,
        RoofType.FLAT: 0.75,
    },
    BuildingType.LOW_RISE: {
        RoofType.FLAT: 1.0,
    },
    BuildingType.SHED: {
        RoofType.FLAT: 1.0,
    },
}

SETBACK_TYPES = (BuildingType.SKYSCRAPER, BuildingType.TOWER)


def classify(height: float, width: float,
             skyscraper_height: float = SKYSCRAPER_HEIGHT,
             tower_height: float = TOWER_HEIGHT,
             tower_max_width: float = TOWER_MAX_WIDTH,
             office_height: float = OFFICE_HEIGHT,
             low_rise_height: float = LOW_RISE_HEIGHT) -> BuildingType:
    """Classify a building by its height and width."""
    if height > skyscraper_height:
        return BuildingType.SKYSCRAPER
    if height > tower_height and width <= tower_max_width:
        return BuildingType.TOWER
    if height > office_height:
        return BuildingType.OFFICE
    if height > low_rise_height:
        return BuildingType.LOW_RISE
    return BuildingType.SHED


def choose_roof_type(building_type: BuildingType, rng: random.Random,
                     distributions: Mapping[BuildingType, Mapping[RoofType, float]] = None) -> RoofType:
    """Draw a roof type from the building type's discrete distribution.

    Types without a distribution always get a flat roof.

    Args:
        building_type: The classified building type.
        rng: Random source to draw from.
        distributions: Per-type mapping of roof type to probability, in draw order.

    Returns:
        The chosen roof type.
    """
    if distributions is None:
        distributions = DEFAULT_ROOF_DISTRIBUTIONS
    weights = distributions.get(building_type)
    if not weights:
        return RoofType.FLAT

    r = rng.random()
    cumulative = 0.0
    for roof_type, probability in weights.items():
        cumulative += probability
        if r < cumulative:
            return roof_type
    return RoofType.FLAT


@dataclass(frozen=True)
class BuildingStyle:
    """Architectural embellishments derived for one building."""
    building_type: BuildingType
    has_setback: bool
    setback_ratio: float
    setback_height: float
    roof_type: RoofType


class BuildingClassifier:
    """Derives a building's archetype and embellishments using configured thresholds."""

    def __init__(self, config, rng: random.Random):
        """Initialize the classifier.

        Args:
            config: Configuration with the `citygen.classifier` section.
            rng: Random source shared with the rest of one generation run.
        """
        self.config = config
        self.rng = rng
        self.thresholds = {
            'skyscraper_height': config['citygen.classifier.skyscraper_height'],
            'tower_height': config['citygen.classifier.tower_height'],
            'tower_max_width': config['citygen.classifier.tower_max_width'],
            'office_height': config['citygen.classifier.office_height'],
            'low_rise_height': config['citygen.classifier.low_rise_height'],
        }
        self.setback_probability = config['citygen.classifier.setback_probability']
        self.setback_ratio_range = config['citygen.classifier.setback_ratio']
        self.setback_height_range = config['citygen.classifier.setback_height']
        self.roof_distributions = self._load_roof_distributions(config.get('citygen.classifier.roofs', {}))

    def classify(self, height: float, width: float) -> BuildingType:
        """Classify a building using the configured thresholds."""
        return classify(height, width, **self.thresholds)

    def style(self, height: float, width: float) -> BuildingStyle:
        """Classify a building and draw its setback and roof.

        Args:
            height: Building height in world units.
            width: Building width in world units.

        Returns:
            The building's style. Without a setback, ratio and height are 1.0.
        """
        building_type = self.classify(height, width)

        has_setback = building_type in SETBACK_TYPES and self.rng.random() < self.setback_probability
        if has_setback:
            setback_ratio = MathUtils.uniform(self.rng, self.setback_ratio_range)
            setback_height = MathUtils.uniform(self.rng, self.setback_height_range)
        else:
            setback_ratio = 1.0
            setback_height = 1.0

        roof_type = choose_roof_type(building_type, self.rng, self.roof_distributions)
        return BuildingStyle(building_type, has_setback, setback_ratio, setback_height, roof_type)

    @staticmethod
    def _load_roof_distributions(raw) -> Dict[BuildingType, Dict[RoofType, float]]:
        """Convert the YAML roof table into enum-keyed distributions.

        Raises:
            ValueError: If the table names an unknown building or roof type.
        """
        if not raw:
            return DEFAULT_ROOF_DISTRIBUTIONS
        distributions = {}
        for type_name, weights in raw.items():
            distributions[BuildingType(type_name)] = {
                RoofType(roof_name): float(probability) for roof_name, probability in weights.items()
            }
        return distributions
