"""Tests for commit records and layout serialisation."""

from lanegraph.graph.lanes import calculate_lanes
from lanegraph.graph.types import CommitRecord, LaneAssignment


class TestCommitRecord:
    def test_is_merge(self):
        assert not CommitRecord("a").is_merge
        assert not CommitRecord("a", parent_hashes=["b"]).is_merge
        assert CommitRecord("a", parent_hashes=["b", "c"]).is_merge

    def test_from_dict_camel_case(self):
        record = CommitRecord.from_dict(
            {"hash": "abc1234def", "parentHashes": ["p1"], "refNames": ["main"], "message": "Fix"}
        )
        assert record.parent_hashes == ["p1"]
        assert record.ref_names == ["main"]
        assert record.short_hash == "abc1234"
        assert record.message == "Fix"

    def test_from_dict_log_keys(self):
        record = CommitRecord.from_dict(
            {"hash": "abc", "shortHash": "ab", "parents": ["p1", "p2"], "refs": ["tag: v1"]}
        )
        assert record.parent_hashes == ["p1", "p2"]
        assert record.ref_names == ["tag: v1"]
        assert record.short_hash == "ab"
        assert record.is_merge

    def test_from_dict_missing_lists(self):
        record = CommitRecord.from_dict({"hash": "abc", "parents": None})
        assert record.parent_hashes == []
        assert record.ref_names == []


class TestSerialisation:
    def test_assignment_to_dict(self):
        assignment = LaneAssignment("abc", 1, [0, 1], [1], "#3b82f6")
        assert assignment.to_dict() == {
            "commitHash": "abc",
            "lane": 1,
            "inLanes": [0, 1],
            "outLanes": [1],
            "color": "#3b82f6",
        }

    def test_graph_to_dict(self):
        graph = calculate_lanes([CommitRecord("C2", ["C1"]), CommitRecord("C1")])
        data = graph.to_dict()

        assert data["maxLane"] == 0
        assert data["colorMap"] == {0: "#f59e0b", 1: "#3b82f6"}
        assert [lane["commitHash"] for lane in data["lanes"]] == ["C2", "C1"]
        assert data["lanes"][0]["outLanes"] == [0]
