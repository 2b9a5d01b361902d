import json
import runpy
import sys
from pathlib import Path

import pytest

from codecity.utils.logger import Logger

SCRIPT = Path(__file__).resolve().parent.parent / 'scripts' / 'generate_city_layout.py'


@pytest.fixture
def script_main():
    yield runpy.run_path(str(SCRIPT), run_name='generate_city_layout')['main']
    Logger.configure()


def test_script_writes_layout(script_main, tmp_path, monkeypatch):
    payload = {
        'success': True,
        'data': {
            'owner': 'octo',
            'repo': 'city',
            'files': [{'path': f'src/f{i}.py', 'size': 4000} for i in range(12)] + [{'path': 'README.md', 'size': 900}],
        },
    }
    source = tmp_path / 'repo.json'
    source.write_text(json.dumps(payload))
    settings = tmp_path / 'settings.yaml'
    settings.write_text('codecity:\n  logging:\n    to_console: false\n')
    output = tmp_path / 'out' / 'layout.json'

    monkeypatch.setattr(sys, 'argv', [
        'generate_city_layout.py', '--input', str(source), '--output', str(output),
        '--config', str(settings), '--seed', '3',
    ])
    assert script_main() == 0

    layout = json.loads(output.read_text())
    assert len(layout['buildings']) == 13
    assert [d['name'] for d in layout['districts']] == ['src', '/']
    assert layout['roads']
    assert layout['gridSize'] >= 20
    assert layout['buildings'][0]['language'] == 'Python'


def test_script_reports_failed_envelope(script_main, tmp_path, monkeypatch):
    source = tmp_path / 'repo.json'
    source.write_text(json.dumps({'success': False, 'data': None, 'error': {'message': 'Rate limited'}}))

    monkeypatch.setattr(sys, 'argv', [
        'generate_city_layout.py', '--input', str(source), '--output', str(tmp_path / 'layout.json'),
    ])
    with pytest.raises(ValueError, match='Rate limited'):
        script_main()
