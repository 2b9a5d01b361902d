from codecity.citygen.district import group_by_folder, top_level_folder
from tests.conftest import make_file


def test_top_level_folder_uses_first_segment():
    assert top_level_folder('src/utils/io') == 'src'
    assert top_level_folder('docs') == 'docs'
    assert top_level_folder('/') == '/'


def test_groups_sorted_by_size_descending():
    files = [
        make_file('docs/a.md'),
        make_file('src/a.py'),
        make_file('src/b/c.py'),
        make_file('src/d/e/f.py'),
        make_file('README.md'),
    ]
    groups = group_by_folder(files)

    assert [g.folder for g in groups] == ['src', 'docs', '/']
    assert [f.path for f in groups[0].files] == ['src/a.py', 'src/b/c.py', 'src/d/e/f.py']


def test_ties_keep_first_seen_order():
    files = [make_file('b/x.py'), make_file('a/x.py'), make_file('c/x.py'), make_file('a/y.py')]
    groups = group_by_folder(files)

    assert [g.folder for g in groups] == ['a', 'b', 'c']


def test_empty_input_yields_no_groups():
    assert group_by_folder([]) == []
