"""lanegraph - lane and color layout for commit graphs"""

from lanegraph.graph import CommitRecord, GraphData, LaneAssignment, calculate_lanes

__all__ = ["CommitRecord", "GraphData", "LaneAssignment", "calculate_lanes"]
