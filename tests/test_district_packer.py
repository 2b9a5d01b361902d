import pytest

from codecity.citygen.dataclass import FolderGroup
from codecity.citygen.district import DistrictPacker, group_by_folder
from codecity.config import Config
from tests.conftest import make_file


def _group(name, count):
    return FolderGroup(name, tuple(make_file(f'{name}/f{i}.py') for i in range(count)))


def _bounding_box(districts):
    min_x = min(d.x - d.width / 2 for d in districts)
    max_x = max(d.x + d.width / 2 for d in districts)
    min_z = min(d.z - d.depth / 2 for d in districts)
    max_z = max(d.z + d.depth / 2 for d in districts)
    return min_x, max_x, min_z, max_z


def test_footprint_of_small_district(config):
    width, depth = DistrictPacker(config).footprint(3)

    assert width == pytest.approx(2 * 4.1 + 2 * 1.0)
    assert depth == pytest.approx(2 * 4.1 + 2 * 1.0)


def test_footprint_includes_block_road_allowance(config):
    width, depth = DistrictPacker(config).footprint(20)

    assert width == pytest.approx(5 * 4.1 + 2.6 + 2.0)
    assert depth == pytest.approx(4 * 4.1 + 2.0)


def test_single_district_is_centered_on_origin(config):
    (district,) = DistrictPacker(config).pack([_group('src', 7)])

    assert district.name == 'src'
    assert district.file_count == 7
    assert district.x == pytest.approx(0)
    assert district.z == pytest.approx(0)


def test_bigger_group_gets_bigger_footprint(config):
    src, docs = DistrictPacker(config).pack([_group('src', 10), _group('docs', 2)])

    assert src.width * src.depth > docs.width * docs.depth
    assert src.x + src.width / 2 + 3.0 == pytest.approx(docs.x - docs.width / 2)


def test_rows_wrap_at_max_row_width(config):
    districts = DistrictPacker(config).pack([_group(f'd{i}', 16) for i in range(5)])

    first_row = districts[:4]
    assert len({round(d.z, 6) for d in first_row}) == 1
    assert districts[4].z > first_row[0].z
    assert districts[4].x - districts[4].width / 2 == pytest.approx(
        first_row[0].x - first_row[0].width / 2)


def test_oversized_district_does_not_leave_empty_row():
    config = Config.from_dict({'citygen': {'district': {'max_row_width': 10}}})
    first, second = DistrictPacker(config).pack([_group('a', 16), _group('b', 16)])

    assert second.z - first.z == pytest.approx(first.depth + 3.0)
    assert first.x == pytest.approx(second.x)


def test_packing_is_centered_and_overlap_free(config, mixed_repo):
    districts = DistrictPacker(config).pack(group_by_folder(mixed_repo.files))

    min_x, max_x, min_z, max_z = _bounding_box(districts)
    assert (min_x + max_x) / 2 == pytest.approx(0, abs=1e-9)
    assert (min_z + max_z) / 2 == pytest.approx(0, abs=1e-9)
    for i, district in enumerate(districts):
        for other in districts[i + 1:]:
            assert not district.bounds.overlaps(other.bounds)


def test_packing_is_deterministic(config, mixed_repo):
    groups = group_by_folder(mixed_repo.files)

    assert DistrictPacker(config).pack(groups) == DistrictPacker(config).pack(groups)


def test_no_groups_no_districts(config):
    assert DistrictPacker(config).pack([]) == []
