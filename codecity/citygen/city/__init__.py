"""City package: assembly of the complete layout and its structural checks."""
from codecity.citygen.city.city_generator import (CityGenerator,
                                                  GenerationState,
                                                  generate_city_layout)
from codecity.citygen.city.layout_checker import LayoutChecker, LayoutIssue

__all__ = ['CityGenerator', 'GenerationState', 'LayoutChecker', 'LayoutIssue', 'generate_city_layout']
