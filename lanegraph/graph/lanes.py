"""Lane assignment for commit graph visualization.

Commits arrive newest first. Each lane remembers the hash it expects to
see next (the first parent of the last commit placed on it); a commit that
matches continues that lane, anything else takes a free lane.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from lanegraph.constants import BRANCH_COLORS, MAX_LANES
from lanegraph.graph.colors import ColorAssigner, get_merge_parent_color
from lanegraph.graph.types import CommitRecord, GraphData, LaneAssignment


class LaneAllocator:
    """Single-use lane and color state for one layout pass."""

    def __init__(self) -> None:
        # Expected commit hash per lane, None when the lane is free
        self.active_lanes: list[str | None] = []
        self.colors = ColorAssigner()
        self.assignments: list[LaneAssignment] = []

    def _find_expecting(self, commit_hash: str) -> int:
        """Index of the first lane expecting ``commit_hash``, or -1."""
        for lane, expected in enumerate(self.active_lanes):
            if expected == commit_hash:
                return lane
        return -1

    def _bind(self, lane: int, expected: str | None) -> None:
        while len(self.active_lanes) <= lane:
            self.active_lanes.append(None)
        self.active_lanes[lane] = expected

    def _resolve_lane(self, commit: CommitRecord) -> int:
        """Pick the lane for a commit."""
        lane = self._find_expecting(commit.hash)
        if lane != -1:
            return lane

        # Not expected - find first free lane
        for index, expected in enumerate(self.active_lanes):
            if expected is None:
                return index

        # Too many lineages at once share lane 0 rather than widen the graph
        if len(self.active_lanes) < MAX_LANES:
            return len(self.active_lanes)
        return 0

    def place(self, commit: CommitRecord) -> LaneAssignment:
        """Place one commit and update the active lanes for its parents."""
        lane = self._resolve_lane(commit)
        color = self.colors.resolve(commit, lane)

        in_lanes: list[int] = []
        for parent_hash in commit.parent_hashes:
            parent_lane = self._find_expecting(parent_hash)
            if parent_lane != -1:
                in_lanes.append(parent_lane)

        assignment = LaneAssignment(
            commit_hash=commit.hash,
            lane=lane,
            in_lanes=in_lanes,
            out_lanes=[lane],
            color=color,
        )
        self.assignments.append(assignment)

        if commit.parent_hashes:
            self._bind(lane, commit.parent_hashes[0])
            self.colors.propagate(commit.parent_hashes[0], color)

            for p, parent_hash in enumerate(commit.parent_hashes[1:], start=1):
                parent_lane = p if p < MAX_LANES else (1 if lane == 0 else 0)
                self._bind(parent_lane, parent_hash)
                self.colors.propagate(parent_hash, get_merge_parent_color(lane, p))
        else:
            # Root commit: the lane is free for an unrelated lineage
            self._bind(lane, None)

        return assignment

    def result(self) -> GraphData:
        max_lane = max((a.lane for a in self.assignments), default=0)
        return GraphData(
            lanes=list(self.assignments),
            max_lane=min(max_lane, MAX_LANES - 1),
            color_map={lane: BRANCH_COLORS[lane] for lane in range(MAX_LANES)},
        )


def calculate_lanes(commits: Iterable[CommitRecord | Mapping[str, Any]]) -> GraphData:
    """Calculate lane assignments for commits.

    Args:
        commits: Commits in display order (newest first). Plain mappings
            are converted with ``CommitRecord.from_dict``.

    Returns:
        GraphData with one LaneAssignment per commit, in input order
    """
    allocator = LaneAllocator()
    for commit in commits:
        if not isinstance(commit, CommitRecord):
            commit = CommitRecord.from_dict(commit)
        allocator.place(commit)
    return allocator.result()
