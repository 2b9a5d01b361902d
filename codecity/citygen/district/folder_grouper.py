"""Folder grouping: partition repository files into top-level folder groups."""
from typing import Dict, Iterable, List

from codecity.citygen.dataclass import FolderGroup, RepoFile
from codecity.citygen.dataclass.dataclass import ROOT_FOLDER


def top_level_folder(folder: str) -> str:
    """Return the district key for a file's folder.

    Repository-root files (folder ``/``) form their own group.
    """
    if folder == ROOT_FOLDER:
        return ROOT_FOLDER
    return folder.split('/')[0]


def group_by_folder(files: Iterable[RepoFile]) -> List[FolderGroup]:
    """Group files by top-level folder, largest group first.

    Ties keep first-seen order since `sorted` is stable.
    """
    groups: Dict[str, List[RepoFile]] = {}
    for file in files:
        groups.setdefault(top_level_folder(file.folder), []).append(file)

    folder_groups = [FolderGroup(folder, tuple(members)) for folder, members in groups.items()]
    return sorted(folder_groups, key=lambda g: len(g.files), reverse=True)
