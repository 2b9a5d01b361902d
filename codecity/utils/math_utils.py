"""Mathematical utility functions for layout calculations."""

import math
from typing import Tuple


class MathUtils:
    """Collection of mathematical utility functions for layout operations."""

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp a value into the closed range [min_value, max_value].

        Args:
            value: The value to clamp.
            min_value: Lower bound.
            max_value: Upper bound.

        Returns:
            The clamped value.
        """
        return min(max_value, max(min_value, value))

    @staticmethod
    def ceil_div(a: int, b: int) -> int:
        """Integer division rounding up."""
        return -(-a // b)

    @staticmethod
    def grid_shape(count: int) -> Tuple[int, int]:
        """Square-ish grid for `count` items.

        Args:
            count: Number of items to arrange.

        Returns:
            Tuple of (cols, rows) with cols = ceil(sqrt(count)) and
            rows = ceil(count / cols). An empty grid is (0, 0).
        """
        if count <= 0:
            return 0, 0
        cols = math.ceil(math.sqrt(count))
        return cols, MathUtils.ceil_div(count, cols)

    @staticmethod
    def uniform(rng, value_range) -> float:
        """Draw uniformly from a [low, high] pair using the given random source."""
        low, high = value_range
        return low + rng.random() * (high - low)
