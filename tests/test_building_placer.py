import random

import pytest

from codecity.citygen.building import BuildingPlacer
from codecity.citygen.dataclass import BuildingType, District
from codecity.config import Config
from tests.conftest import make_file


def _district(name='/', count=3, x=0.0, z=0.0, width=10.2, depth=10.2):
    return District(name=name, x=x, z=z, width=width, depth=depth, file_count=count)


def test_three_files_fill_two_column_grid(config):
    files = [make_file(f'f{i}.py') for i in range(3)]
    placer = BuildingPlacer(config, random.Random(0))
    buildings = placer.place_district(files, _district())

    positions = [(round(b.x, 6), round(b.z, 6)) for b in buildings]
    assert positions == [(-2.05, -2.05), (2.05, -2.05), (-2.05, 2.05)]


def test_positions_follow_district_center(config):
    files = [make_file(f'src/f{i}.py') for i in range(4)]
    placer = BuildingPlacer(config, random.Random(0))
    at_origin = placer.place_district(files, _district('src', 4))
    moved = placer.place_district(files, _district('src', 4, x=10.0, z=-5.0))

    for a, b in zip(at_origin, moved):
        assert b.x - a.x == pytest.approx(10.0)
        assert b.z - a.z == pytest.approx(-5.0)


def test_huge_file_is_clamped_to_max_skyscraper(config):
    file = make_file('big.py', size=500000, lines=10000)
    (building,) = BuildingPlacer(config, random.Random(0)).place_district([file], _district(count=1))

    assert building.height == 30
    assert building.width == 3.5
    assert building.building_type == BuildingType.SKYSCRAPER
    assert building.y == pytest.approx(15)


def test_negative_inputs_degrade_to_minimum_size(config):
    file = make_file('odd.py', size=-10, lines=-5)
    (building,) = BuildingPlacer(config, random.Random(0)).place_district([file], _district(count=1))

    assert building.height == 0.4
    assert building.width == 0.5
    assert building.building_type == BuildingType.SHED


def test_derived_fields_stay_in_range(config):
    rng = random.Random(3)
    files = [
        make_file(f'src/f{i}.py', size=rng.randint(0, 9000), lines=rng.randint(1, 4000), frequent=i % 2 == 0)
        for i in range(25)
    ]
    buildings = BuildingPlacer(config, random.Random(5)).place_district(files, _district('src', 25, width=28.3, depth=28.3))

    for file, building in zip(files, buildings):
        assert building.path == file.path
        assert building.commit_count == file.commit_count
        assert building.district == 'src'
        assert 0.5 <= building.depth <= 3.5
        assert building.y == pytest.approx(building.height / 2)
        assert 0 <= building.wall_tint < 1
        if file.is_frequently_updated:
            assert 0.6 <= building.emissive_intensity <= 1.0
        else:
            assert 0.05 <= building.emissive_intensity <= 0.15
        if not building.has_setback:
            assert building.setback_ratio == building.setback_height == 1.0


def test_blocks_leave_road_gap(config):
    files = [make_file(f'src/f{i}.py', size=500000) for i in range(20)]
    buildings = BuildingPlacer(config, random.Random(0)).place_district(files, _district('src', 20, width=25.1, depth=18.4))

    col3 = buildings[3]
    col4 = buildings[4]
    gap = (col4.x - col4.width / 2) - (col3.x + col3.width / 2)
    assert gap == pytest.approx(0.6 + 2.6)


def test_same_seed_same_buildings(config):
    files = [make_file(f'f{i}.py', size=i * 700, lines=i * 90 + 1) for i in range(9)]

    first = BuildingPlacer(config, random.Random(42)).place_district(files, _district(count=9))
    second = BuildingPlacer(config, random.Random(42)).place_district(files, _district(count=9))

    assert first == second


def test_truncate_keeps_first_files():
    config = Config.from_dict({'citygen': {'max_buildings': 5}})
    files = [make_file(f'f{i}.py') for i in range(8)]

    kept = BuildingPlacer(config, random.Random(0)).truncate(files)

    assert [f.path for f in kept] == [f'f{i}.py' for i in range(5)]
