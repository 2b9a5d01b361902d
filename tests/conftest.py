"""Shared fixtures for the CodeCity test suite."""
import random

import pytest

from codecity.citygen.dataclass import RepoData, RepoFile
from codecity.config import Config


def make_file(path, size=2000, lines=None, language='Python', commit_count=3, frequent=False):
    """Build a RepoFile the way the retrieval layer would."""
    folder = path.rsplit('/', 1)[0] if '/' in path else '/'
    return RepoFile(
        path=path,
        name=path.split('/')[-1],
        size=size,
        lines=lines if lines is not None else max(1, round(size / 40)),
        language=language,
        color='#3572A5',
        folder=folder,
        commit_count=commit_count,
        is_frequently_updated=frequent,
    )


def make_repo(files, owner='octo', repo='city'):
    return RepoData.from_files(owner, repo, files)


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def config():
    return Config.from_dict({'codecity': {'logging': {'to_console': False}}})


@pytest.fixture
def mixed_repo():
    """A repository with several folders of very different sizes."""
    rng = random.Random(7)
    files = []
    folders = {'src': 37, 'tests': 18, 'docs': 5, 'scripts': 3, 'assets': 11, '/': 4, 'lib': 1}
    for folder, count in folders.items():
        for i in range(count):
            path = f'file_{i}.py' if folder == '/' else f'{folder}/pkg_{i % 3}/file_{i}.py'
            files.append(make_file(
                path,
                size=rng.randint(0, 20000),
                lines=rng.randint(1, 3000),
                frequent=rng.random() < 0.2,
            ))
    return make_repo(files)
