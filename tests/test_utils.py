import json
import logging

import pytest

from codecity import generate_city_layout
from codecity.config import Config
from codecity.utils.data_exporter import DataExporter
from codecity.utils.load_json import load_json, load_repo_data
from codecity.utils.logger import Logger
from codecity.utils.seeds import derive_seed
from tests.conftest import make_file, make_repo

REPO_PAYLOAD = {
    'owner': 'octo',
    'repo': 'city',
    'files': [
        {'path': 'src/main.py', 'size': 1200, 'lines': 30, 'language': 'Python', 'commitCount': 4},
        {'path': 'README.md', 'size': 300},
    ],
}


def test_derive_seed_is_stable_and_32_bit():
    seed = derive_seed('octo/city')

    assert seed == derive_seed('octo/city')
    assert seed != derive_seed('octo/town')
    assert 0 <= seed < 2 ** 32


def test_load_repo_data_from_plain_document(tmp_path):
    path = tmp_path / 'repo.json'
    path.write_text(json.dumps(REPO_PAYLOAD))

    data = load_repo_data(path)

    assert data.slug == 'octo/city'
    assert [f.path for f in data.files] == ['src/main.py', 'README.md']
    assert data.files[1].lines == 8


def test_load_repo_data_from_api_envelope(tmp_path):
    path = tmp_path / 'repo.json'
    path.write_text(json.dumps({'success': True, 'cached': False, 'data': REPO_PAYLOAD}))

    assert load_repo_data(path).total_files == 2


def test_failed_envelope_raises(tmp_path):
    path = tmp_path / 'repo.json'
    path.write_text(json.dumps({'success': False, 'data': None, 'error': {'message': 'Not found', 'code': 'NOT_FOUND'}}))

    with pytest.raises(ValueError, match='Not found'):
        load_repo_data(path)


def test_load_json_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / 'missing.json')

    bad = tmp_path / 'bad.json'
    bad.write_text('{not json')
    with pytest.raises(ValueError):
        load_json(bad)


def test_exporter_writes_renderer_shape(config, tmp_path):
    files = [make_file(f'src/f{i}.py', frequent=True) for i in range(5)] + [make_file('docs/a.md')]
    layout = generate_city_layout(make_repo(files), config, seed=1)
    output = tmp_path / 'out' / 'layout.json'

    DataExporter(layout).export_to_json(str(output))
    data = json.loads(output.read_text())

    assert set(data) == {'buildings', 'districts', 'roads', 'gridSize'}
    assert len(data['buildings']) == 6
    building = data['buildings'][0]
    assert building['path'] == 'src/f0.py'
    assert building['isFrequentlyUpdated'] is True
    assert building['buildingType'] in {'skyscraper', 'tower', 'office', 'low-rise', 'shed'}
    assert building['roofType'] in {'flat', 'antenna', 'helipad', 'mechanical'}
    assert building['emissiveIntensity'] == round(building['emissiveIntensity'], 4)
    assert data['districts'][0]['fileCount'] == 5
    assert data['gridSize'] == round(layout.grid_size, 4)
    assert len(data['roads']) == len(layout.roads)


def test_child_loggers_live_under_codecity():
    assert Logger.get_logger('CityGenerator').name == 'CodeCity.CityGenerator'


@pytest.fixture
def default_logging():
    yield
    Logger.configure()


def _codecity_handlers():
    return [type(handler) for handler in logging.getLogger('CodeCity').handlers]


def test_generator_applies_console_switch(default_logging):
    repo = make_repo([make_file('src/a.py')])

    generate_city_layout(repo, Config.from_dict({'codecity': {'logging': {'to_console': True}}}), seed=1)
    assert logging.StreamHandler in _codecity_handlers()

    generate_city_layout(repo, Config.from_dict({'codecity': {'logging': {'to_console': False}}}), seed=1)
    assert logging.StreamHandler not in _codecity_handlers()


def test_generator_applies_disabled_logging(default_logging):
    config = Config.from_dict({'codecity': {'logging': {'enabled': False, 'to_console': False}}})
    generate_city_layout(make_repo([make_file('src/a.py')]), config, seed=1)

    assert _codecity_handlers() == [logging.NullHandler]
    assert not logging.getLogger('CodeCity.CityGenerator').propagate
