from dataclasses import dataclass, field
from typing import Optional, FrozenSet


@dataclass(frozen=True)
class ArtifactCoordinate:
    """A library identified by group and name, independent of version."""
    group: str
    artifact_name: str

    def __str__(self):
        return f"{self.group}:{self.artifact_name}"


@dataclass(frozen=True)
class ClassPathEntry:
    path: str
    source_path: Optional[str] = None

    def to_dict(self):
        return {"path": self.path, "source_path": self.source_path}


@dataclass(frozen=True)
class ClassPathResult:
    entries: FrozenSet[ClassPathEntry] = field(default_factory=frozenset)

    def __bool__(self):
        return bool(self.entries)

    def to_list(self):
        return [entry.to_dict() for entry in sorted(self.entries, key=lambda e: e.path)]
