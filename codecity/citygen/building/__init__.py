"""Building package: classification and per-district placement of buildings."""
from codecity.citygen.building.building_classifier import (BuildingClassifier,
                                                           BuildingStyle,
                                                           choose_roof_type,
                                                           classify)
from codecity.citygen.building.building_placer import BuildingPlacer

__all__ = ['BuildingClassifier', 'BuildingPlacer', 'BuildingStyle', 'choose_roof_type', 'classify']
