"""Commit graph layout: lanes, edges and branch colors."""

from lanegraph.graph.colors import hash_branch_color
from lanegraph.graph.lanes import LaneAllocator, calculate_lanes
from lanegraph.graph.types import CommitRecord, GraphData, LaneAssignment

__all__ = [
    "CommitRecord",
    "GraphData",
    "LaneAllocator",
    "LaneAssignment",
    "calculate_lanes",
    "hash_branch_color",
]
