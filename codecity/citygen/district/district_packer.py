"""District packer module for arranging district footprints on the ground plane.

Districts are packed greedily left to right into rows. A new row starts when the
next footprint would push a non-empty row past the maximum row width. Placement only
ever extends the current row or opens a fresh one below it, so footprints cannot
overlap. The finished arrangement is translated so its bounding box is centred on
the origin.
"""
from typing import List, Sequence, Tuple

import numpy as np

from codecity.citygen.dataclass import District, FolderGroup
from codecity.utils.grid_utils import BlockGrid
from codecity.utils.logger import Logger
from codecity.utils.math_utils import MathUtils


class DistrictPacker:
    """Computes district footprints and packs them into centred rows."""

    def __init__(self, config):
        """Initialize the district packer.

        Args:
            config: Configuration with the `citygen.district` section.
        """
        self.config = config
        self.grid = BlockGrid(config)
        self.padding = config['citygen.district.padding']
        self.gap = config['citygen.district.gap']
        self.max_row_width = config['citygen.district.max_row_width']

        self.logger = Logger.get_logger('DistrictPacker')

    def footprint(self, file_count: int) -> Tuple[float, float]:
        """Footprint size of a district holding `file_count` buildings.

        Args:
            file_count: Number of files in the district.

        Returns:
            Tuple of (width, depth) including the padding around the content box.
        """
        cols, rows = MathUtils.grid_shape(file_count)
        width = self.grid.content_extent(cols) + 2 * self.padding
        depth = self.grid.content_extent(rows) + 2 * self.padding
        return width, depth

    def pack(self, groups: Sequence[FolderGroup]) -> List[District]:
        """Place one district per folder group.

        Args:
            groups: Folder groups in placement order.

        Returns:
            Districts in the same order as `groups`, centred on the origin.
        """
        placed = []
        cursor_x = 0.0
        cursor_z = 0.0
        row_depth = 0.0
        row_empty = True

        for group in groups:
            width, depth = self.footprint(len(group.files))

            if not row_empty and cursor_x + width > self.max_row_width:
                cursor_x = 0.0
                cursor_z += row_depth + self.gap
                row_depth = 0.0
                row_empty = True

            placed.append((group, cursor_x + width / 2, cursor_z + depth / 2, width, depth))
            cursor_x += width + self.gap
            row_depth = max(row_depth, depth)
            row_empty = False

        if not placed:
            return []

        centers = np.array([(x, z) for _, x, z, _, _ in placed])
        sizes = np.array([(w, d) for _, _, _, w, d in placed])
        mins = (centers - sizes / 2).min(axis=0)
        maxs = (centers + sizes / 2).max(axis=0)
        offset_x, offset_z = (mins + maxs) / 2

        districts = [
            District(
                name=group.folder,
                x=float(x - offset_x),
                z=float(z - offset_z),
                width=width,
                depth=depth,
                file_count=len(group.files),
            )
            for group, x, z, width, depth in placed
        ]
        for district in districts:
            self.logger.debug(
                f'District {district.name!r}: {district.file_count} files at '
                f'({district.x:.2f}, {district.z:.2f}) size {district.width:.2f}x{district.depth:.2f}'
            )
        return districts
