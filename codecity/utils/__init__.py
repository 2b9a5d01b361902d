"""Utility helpers shared by the layout engine: logging, seeding, geometry and I/O."""
