"""Module for data classes defining the inputs and outputs of city generation.

World coordinates use the renderer's convention: the ground plane is x/z and y points
up. Footprints are handled as 2D `Bounds` whose `y` axis maps to world z.
"""
from collections import Counter
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from codecity.utils.language_map import get_language_info

DEFAULT_LANGUAGE = 'Unknown'
ROOT_FOLDER = '/'


def estimate_lines(size: int, bytes_per_line: int = 40) -> int:
    """Estimate a line count from a byte size, never below one line."""
    return max(1, round(max(size, 0) / bytes_per_line))


class BuildingType(str, Enum):
    """Architectural archetype derived from a building's height and width."""
    SKYSCRAPER = 'skyscraper'
    TOWER = 'tower'
    OFFICE = 'office'
    LOW_RISE = 'low-rise'
    SHED = 'shed'


class RoofType(str, Enum):
    """Roof decoration drawn per building type."""
    FLAT = 'flat'
    ANTENNA = 'antenna'
    HELIPAD = 'helipad'
    MECHANICAL = 'mechanical'


@dataclass(frozen=True, eq=True)
class Bounds:
    """An axis-aligned bounding box.

    (x, y) is the bottom-left corner of the bounding box
    width: width of the bounding box
    height: height of the bounding box (extent along world z)
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_center(cls, cx: float, cy: float, width: float, height: float) -> 'Bounds':
        """Create bounds of the given size centred on (cx, cy)."""
        return cls(cx - width / 2, cy - height / 2, width, height)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def overlaps(self, other: 'Bounds', tolerance: float = 1e-9) -> bool:
        """Checks if the interiors of two bounding boxes overlap (touching does not count)."""
        return (self.x < other.max_x - tolerance and other.x < self.max_x - tolerance and
                self.y < other.max_y - tolerance and other.y < self.max_y - tolerance)

    def contains(self, other: 'Bounds', tolerance: float = 1e-9) -> bool:
        """Checks if `other` lies entirely inside these bounds."""
        return (other.x >= self.x - tolerance and other.max_x <= self.max_x + tolerance and
                other.y >= self.y - tolerance and other.max_y <= self.max_y + tolerance)


@dataclass(frozen=True)
class RepoFile:
    """One repository file as supplied by the retrieval layer."""
    path: str
    name: str
    size: int
    lines: int
    language: str
    color: str
    folder: str
    commit_count: int
    is_frequently_updated: bool

    @classmethod
    def from_dict(cls, data: dict, bytes_per_line: int = 40) -> 'RepoFile':
        """Build a file from the retrieval layer's camelCase mapping.

        Missing optional fields are derived from the path or defaulted. Language and
        colour come from the file extension when absent.

        Args:
            data: Mapping with at least a `path` key.
            bytes_per_line: Divisor used to estimate `lines` when it is absent.

        Returns:
            The parsed RepoFile.

        Raises:
            ValueError: If `data` is not a mapping or has no usable path.
        """
        if not isinstance(data, dict):
            raise ValueError(f'File entry must be a mapping, got {type(data).__name__}')
        path = data.get('path')
        if not isinstance(path, str) or not path:
            raise ValueError(f'File entry has no path: {data!r}')

        size = int(data.get('size') or 0)
        lines = data.get('lines')
        language, color = get_language_info(path)
        if '/' in path:
            default_folder = path[:path.rindex('/')]
        else:
            default_folder = ROOT_FOLDER
        return cls(
            path=path,
            name=data.get('name') or path.split('/')[-1],
            size=size,
            lines=int(lines) if lines is not None else estimate_lines(size, bytes_per_line),
            language=data.get('language') or language,
            color=data.get('color') or color,
            folder=data.get('folder') or default_folder,
            commit_count=int(data.get('commitCount') or 0),
            is_frequently_updated=bool(data.get('isFrequentlyUpdated', False)),
        )

    def to_dict(self):
        """Convert the file to the renderer's camelCase representation."""
        return {
            'path': self.path,
            'name': self.name,
            'size': self.size,
            'lines': self.lines,
            'language': self.language,
            'color': self.color,
            'folder': self.folder,
            'commitCount': self.commit_count,
            'isFrequentlyUpdated': self.is_frequently_updated,
        }


@dataclass(frozen=True)
class RepoData:
    """A repository snapshot: its files plus summary statistics."""
    owner: str
    repo: str
    files: Tuple[RepoFile, ...] = ()
    total_files: int = 0
    total_lines: int = 0
    main_language: str = DEFAULT_LANGUAGE
    largest_file: str = ''
    language_breakdown: Dict[str, int] = field(default_factory=dict)
    folders: Tuple[str, ...] = ()
    fetched_at: Optional[str] = None

    @property
    def slug(self) -> str:
        """Return the ``owner/repo`` identifier."""
        return f'{self.owner}/{self.repo}'

    @classmethod
    def from_files(cls, owner: str, repo: str, files, fetched_at: Optional[str] = None) -> 'RepoData':
        """Build repository data from files, computing the summary statistics.

        Args:
            owner: Repository owner.
            repo: Repository name.
            files: Iterable of RepoFile, order preserved.
            fetched_at: Optional timestamp of the snapshot.

        Returns:
            The RepoData with totals, main language, largest file, language
            percentages and the folder list filled in.
        """
        files = tuple(files)
        counts = Counter(f.language for f in files)
        largest = max(files, key=lambda f: f.size, default=None)
        return cls(
            owner=owner,
            repo=repo,
            files=files,
            total_files=len(files),
            total_lines=sum(f.lines for f in files),
            main_language=counts.most_common(1)[0][0] if counts else DEFAULT_LANGUAGE,
            largest_file=largest.path if largest is not None else '',
            language_breakdown={lang: round(count / len(files) * 100) for lang, count in counts.items()},
            folders=tuple(dict.fromkeys(f.folder for f in files)),
            fetched_at=fetched_at,
        )

    @classmethod
    def from_dict(cls, data: dict, bytes_per_line: int = 40) -> 'RepoData':
        """Build repository data from the retrieval layer's camelCase mapping.

        Summary fields missing from `data` are recomputed from its files.

        Raises:
            ValueError: If `data` is not a mapping or `files` is not a list.
        """
        if not isinstance(data, dict):
            raise ValueError(f'Repository data must be a mapping, got {type(data).__name__}')
        raw_files = data.get('files', [])
        if not isinstance(raw_files, list):
            raise ValueError('Repository data field "files" must be a list')

        files = [RepoFile.from_dict(item, bytes_per_line) for item in raw_files]
        computed = cls.from_files(data.get('owner', ''), data.get('repo', ''), files, data.get('fetchedAt'))
        return cls(
            owner=computed.owner,
            repo=computed.repo,
            files=computed.files,
            total_files=data.get('totalFiles', computed.total_files),
            total_lines=data.get('totalLines', computed.total_lines),
            main_language=data.get('mainLanguage', computed.main_language),
            largest_file=data.get('largestFile', computed.largest_file),
            language_breakdown=dict(data.get('languageBreakdown', computed.language_breakdown)),
            folders=tuple(data.get('folders', computed.folders)),
            fetched_at=computed.fetched_at,
        )


@dataclass(frozen=True)
class FolderGroup:
    """Files sharing one top-level folder; becomes one district."""
    folder: str
    files: Tuple[RepoFile, ...]


@dataclass(frozen=True)
class District:
    """A district: the footprint reserved for one folder group."""
    name: str
    x: float
    z: float
    width: float
    depth: float
    file_count: int

    @property
    def bounds(self) -> Bounds:
        """Return the footprint as bounds on the ground plane."""
        return Bounds.from_center(self.x, self.z, self.width, self.depth)

    def to_dict(self):
        """Convert the district to dictionary representation."""
        return {
            'name': self.name,
            'x': self.x,
            'z': self.z,
            'width': self.width,
            'depth': self.depth,
            'fileCount': self.file_count,
        }


@dataclass(frozen=True)
class BuildingData(RepoFile):
    """A building: one repository file plus its derived geometry and styling."""
    height: float
    width: float
    depth: float
    x: float
    y: float
    z: float
    emissive_intensity: float
    building_type: BuildingType
    has_setback: bool
    setback_ratio: float
    setback_height: float
    roof_type: RoofType
    wall_tint: float
    district: str

    @classmethod
    def from_file(cls, file: RepoFile, **derived) -> 'BuildingData':
        """Create a building carrying all of `file`'s fields plus the derived ones."""
        return cls(**asdict(file), **derived)

    @property
    def footprint(self) -> Bounds:
        """Return the ground-plane footprint of the building."""
        return Bounds.from_center(self.x, self.z, self.width, self.depth)

    def to_dict(self):
        """Convert the building to dictionary representation."""
        data = super().to_dict()
        data.update({
            'height': self.height,
            'width': self.width,
            'depth': self.depth,
            'x': self.x,
            'y': self.y,
            'z': self.z,
            'emissiveIntensity': self.emissive_intensity,
            'buildingType': self.building_type.value,
            'hasSetback': self.has_setback,
            'setbackRatio': self.setback_ratio,
            'setbackHeight': self.setback_height,
            'roofType': self.roof_type.value,
            'wallTint': self.wall_tint,
            'district': self.district,
        })
        return data


@dataclass(frozen=True)
class RoadSegment:
    """A straight road slab spanning the city, given by its centre and size."""
    x: float
    z: float
    width: float
    depth: float

    @property
    def is_vertical(self) -> bool:
        """Return True for north-south roads."""
        return self.depth > self.width

    @property
    def bounds(self) -> Bounds:
        return Bounds.from_center(self.x, self.z, self.width, self.depth)

    def to_dict(self):
        """Convert the road to dictionary representation."""
        return {
            'x': self.x,
            'z': self.z,
            'width': self.width,
            'depth': self.depth,
        }


@dataclass(frozen=True)
class CityLayout:
    """The complete city: buildings, districts, roads and the half-extent of the city."""
    buildings: Tuple[BuildingData, ...] = ()
    districts: Tuple[District, ...] = ()
    roads: Tuple[RoadSegment, ...] = ()
    grid_size: float = 0.0

    def to_dict(self):
        """Convert the layout to dictionary representation."""
        return {
            'buildings': [b.to_dict() for b in self.buildings],
            'districts': [d.to_dict() for d in self.districts],
            'roads': [r.to_dict() for r in self.roads],
            'gridSize': self.grid_size,
        }
