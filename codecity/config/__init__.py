"""Configuration management package.

This package provides functionality for loading and managing layout configuration.
It exposes the geometry constants, classifier thresholds and logging switches used
throughout the city generation engine.
"""

from codecity.config.config_loader import Config

__all__ = ['Config']
