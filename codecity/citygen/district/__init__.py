"""District package: folder grouping and district footprint packing."""
from codecity.citygen.district.district_packer import DistrictPacker
from codecity.citygen.district.folder_grouper import group_by_folder, top_level_folder

__all__ = ['DistrictPacker', 'group_by_folder', 'top_level_folder']
