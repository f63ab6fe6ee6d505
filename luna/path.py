"""
Traversal paths for luna accessors.

A path records the keys and indices walked from the document root and renders
them for error messages, e.g. "$['people'][0]['score']".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

ROOT_MARKER = "$"


class PathSegmentType(Enum):
    KEY = auto()
    INDEX = auto()


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A single step in a traversal."""

    type: PathSegmentType
    value: str | int

    @classmethod
    def key(cls, name: str) -> PathSegment:
        return cls(PathSegmentType.KEY, name)

    @classmethod
    def index(cls, idx: int) -> PathSegment:
        return cls(PathSegmentType.INDEX, idx)

    def render(self) -> str:
        if self.type is PathSegmentType.INDEX:
            return f"[{self.value}]"
        escaped = str(self.value).replace("\\", "\\\\").replace("'", "\\'")
        return f"['{escaped}']"


@dataclass(frozen=True, slots=True)
class Path:
    """
    Immutable, append-only traversal path.

    Appending never modifies the receiver; a new Path is returned so that
    sibling accessors can share their parent's prefix.
    """

    segments: tuple[PathSegment, ...] = ()

    @classmethod
    def root(cls) -> Path:
        return cls()

    def append(self, segment: PathSegment) -> Path:
        return Path((*self.segments, segment))

    def append_key(self, key: str) -> Path:
        return self.append(PathSegment.key(key))

    def append_index(self, idx: int) -> Path:
        return self.append(PathSegment.index(idx))

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return ROOT_MARKER + "".join(segment.render() for segment in self.segments)
