#!/usr/bin/env python3
"""
lanegraph - print the lane layout of a repository's commit graph
"""

import argparse
import json
import sys
from pathlib import Path

from lanegraph.config.settings import Settings
from lanegraph.git_backend.repository import CommitLogRepository
from lanegraph.graph.lanes import calculate_lanes
from lanegraph.graph.types import CommitRecord, GraphData


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="lanegraph",
        description="Lay out a repository's commit graph in lanes",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        default=None,
        help="Repository path (default: search upwards from the current directory)",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of commits to read")
    parser.add_argument(
        "--head-only",
        action="store_true",
        help="Only walk history reachable from HEAD",
    )
    parser.add_argument("--json", action="store_true", help="Print the layout as JSON")
    parser.add_argument("--config", type=Path, help="Settings file to use")
    return parser.parse_args(argv)


def format_rows(commits: list[CommitRecord], graph: GraphData) -> list[str]:
    """Render one text row per commit: lane markers, short hash, refs, subject."""
    width = graph.max_lane + 1
    lines = []
    for commit, assignment in zip(commits, graph.lanes):
        markers = ["|"] * max(width, assignment.lane + 1)
        markers[assignment.lane] = "*"
        refs = f" ({', '.join(commit.ref_names)})" if commit.ref_names else ""
        short_hash = commit.short_hash or commit.hash[:7]
        lines.append(f"{' '.join(markers)}  {short_hash}{refs} {commit.message}".rstrip())
    return lines


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = Settings(args.config)

    limit = args.limit if args.limit is not None else settings.get_log_limit()
    all_refs = settings.get_all_refs() and not args.head_only

    try:
        repo = CommitLogRepository(args.repo)
        commits = repo.read_commits(limit=limit, all_refs=all_refs)
    except ValueError as e:
        print(f"lanegraph: {e}", file=sys.stderr)
        sys.exit(1)

    graph = calculate_lanes(commits)

    if args.json or settings.get_output_format() == "json":
        print(json.dumps({"head": repo.head_hash(), "graph": graph.to_dict()}, indent=2))
    else:
        for line in format_rows(commits, graph):
            print(line)


if __name__ == "__main__":
    main()
