"""City generation package: districts, buildings and roads derived from repository files."""
