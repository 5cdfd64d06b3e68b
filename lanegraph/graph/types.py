"""Types for commit graph layout."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CommitRecord:
    """A commit as read from the log, newest first."""

    hash: str
    parent_hashes: list[str] = field(default_factory=list)
    ref_names: list[str] = field(default_factory=list)
    short_hash: str = ""
    message: str = ""
    author: str = ""
    date: str = ""

    @property
    def is_merge(self) -> bool:
        return len(self.parent_hashes) > 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommitRecord":
        """Build a record from a log entry.

        Accepts both ``parentHashes``/``refNames`` and the shorter
        ``parents``/``refs`` keys used by git log consumers.
        """
        parents = data.get("parentHashes", data.get("parents")) or []
        refs = data.get("refNames", data.get("refs")) or []
        commit_hash = str(data["hash"])
        return cls(
            hash=commit_hash,
            parent_hashes=[str(p) for p in parents],
            ref_names=[str(r) for r in refs],
            short_hash=str(data.get("shortHash", commit_hash[:7])),
            message=str(data.get("message", "")),
            author=str(data.get("author", "")),
            date=str(data.get("date", "")),
        )


@dataclass
class LaneAssignment:
    """Where one commit sits in the graph and which lanes connect to it."""

    commit_hash: str
    lane: int
    in_lanes: list[int]
    out_lanes: list[int]
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "commitHash": self.commit_hash,
            "lane": self.lane,
            "inLanes": list(self.in_lanes),
            "outLanes": list(self.out_lanes),
            "color": self.color,
        }


@dataclass
class GraphData:
    """Layout for a whole commit list."""

    lanes: list[LaneAssignment]
    max_lane: int
    # Fixed two-entry map; per-commit colors live on each LaneAssignment
    color_map: dict[int, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "lanes": [assignment.to_dict() for assignment in self.lanes],
            "maxLane": self.max_lane,
            "colorMap": dict(self.color_map),
        }
