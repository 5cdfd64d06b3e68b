"""Branch color derivation for the commit graph."""

from lanegraph.constants import BRANCH_COLORS
from lanegraph.graph.types import CommitRecord


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_branch_name(branch_name: str) -> int:
    """Stable 32-bit string hash (``h * 31 + c`` fold).

    Independent of PYTHONHASHSEED; the same name hashes the same in every run.
    """
    h = 0
    for char in branch_name:
        h = _to_int32((h << 5) - h + ord(char))
    return h


def hash_branch_color(branch_name: str) -> str:
    """Hash branch name to consistent color"""
    return BRANCH_COLORS[abs(hash_branch_name(branch_name)) % len(BRANCH_COLORS)]


def get_lane_color(lane: int) -> str:
    """Get the positional default color for a lane."""
    return BRANCH_COLORS[lane % len(BRANCH_COLORS)]


def get_merge_parent_color(lane: int, parent_index: int) -> str:
    """Color for a merge-source parent, offset from the merging commit's lane."""
    return BRANCH_COLORS[(lane + parent_index) % len(BRANCH_COLORS)]


class ColorAssigner:
    """Per-commit color table for one layout pass.

    Colors are decided in this order: a color already pushed onto the
    commit by a child, the commit's first ref name, the first parent's
    recorded color, and finally the lane's positional color.
    """

    def __init__(self) -> None:
        self.commit_colors: dict[str, str] = {}

    def resolve(self, commit: CommitRecord, lane: int) -> str:
        """Decide and record the color for a commit placed on ``lane``."""
        color = self.commit_colors.get(commit.hash)
        if color:
            return color

        if commit.ref_names:
            color = hash_branch_color(commit.ref_names[0])
        elif commit.parent_hashes and commit.parent_hashes[0] in self.commit_colors:
            color = self.commit_colors[commit.parent_hashes[0]]
        else:
            color = get_lane_color(lane)

        self.commit_colors[commit.hash] = color
        return color

    def propagate(self, parent_hash: str, color: str) -> None:
        """Hand a color down to a parent that hasn't been laid out yet."""
        self.commit_colors[parent_hash] = color
