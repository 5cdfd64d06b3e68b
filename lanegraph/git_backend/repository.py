"""
Commit log reading using pygit2
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygit2

from lanegraph.constants import DEFAULT_LOG_LIMIT, SHORT_HASH_LENGTH
from lanegraph.graph.types import CommitRecord


class CommitLogRepository:
    """Reads commit history in the shape the lane engine consumes"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Initialize repository"""
        if repo_path is None:
            repo_path = self._find_repo()

        try:
            self.repo = pygit2.Repository(repo_path)
        except pygit2.GitError as e:
            raise ValueError("Not in a git repository") from e

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        current = Path.cwd()
        while current != current.parent:
            if (current / ".git").exists():
                return str(current)
            current = current.parent
        raise ValueError("Not in a git repository")

    def head_hash(self) -> str | None:
        """Get the commit HEAD points at, or None on an unborn branch"""
        if self.repo.head_is_unborn:
            return None
        return str(self.repo.head.peel(pygit2.Commit).id)

    def _peel_ref(self, refname: str) -> pygit2.Oid | None:
        """Resolve a reference name to a commit id, None if it isn't a commit"""
        try:
            return self.repo.references[refname].peel(pygit2.Commit).id
        except (KeyError, ValueError, pygit2.GitError) as e:
            print(f"[git log] Skipping {refname}: {e}", file=sys.stderr)
            return None

    def _collect_decorations(self) -> dict[str, list[str]]:
        """Build oid -> decorations, spelled the way ``git log %D`` does.

        HEAD comes first, then tags, local branches and remote branches,
        each group sorted by name.
        """
        head_branch: str | None = None
        decorations: dict[str, list[str]] = {}

        def add(oid: pygit2.Oid | str | None, label: str) -> None:
            if oid is not None:
                decorations.setdefault(str(oid), []).append(label)

        head_oid = self.head_hash()
        if head_oid is not None:
            if self.repo.head_is_detached:
                add(head_oid, "HEAD")
            else:
                head_branch = self.repo.head.shorthand
                add(head_oid, f"HEAD -> {head_branch}")

        refnames = sorted(self.repo.references)
        for refname in refnames:
            if refname.startswith("refs/tags/"):
                add(self._peel_ref(refname), f"tag: {refname[len('refs/tags/'):]}")
        for refname in refnames:
            if refname.startswith("refs/heads/"):
                name = refname[len("refs/heads/") :]
                if name != head_branch:
                    add(self._peel_ref(refname), name)
        for refname in refnames:
            if refname.startswith("refs/remotes/"):
                add(self._peel_ref(refname), refname[len("refs/remotes/") :])

        return decorations

    def _tip_oids(self, all_refs: bool) -> list[pygit2.Oid]:
        """Starting points for the history walk"""
        tips: list[pygit2.Oid] = []
        if not self.repo.head_is_unborn:
            tips.append(self.repo.head.peel(pygit2.Commit).id)
        if not all_refs:
            return tips

        for refname in sorted(self.repo.references):
            if not refname.startswith(("refs/heads/", "refs/remotes/", "refs/tags/")):
                continue
            oid = self._peel_ref(refname)
            if oid is not None:
                tips.append(oid)
        return tips

    def read_commits(self, limit: int = DEFAULT_LOG_LIMIT, all_refs: bool = True) -> list[CommitRecord]:
        """
        Read recent commits, newest first.

        Args:
            limit: Maximum number of commits to return
            all_refs: Walk from every branch and tag, not just HEAD

        Returns:
            Commit records with parents and decorations filled in
        """
        if limit < 1:
            raise ValueError("limit must be a positive integer")

        tips = self._tip_oids(all_refs)
        if not tips:
            return []

        decorations = self._collect_decorations()

        walker = self.repo.walk(tips[0], pygit2.enums.SortMode.TIME)
        for oid in tips[1:]:
            walker.push(oid)

        commits: list[CommitRecord] = []
        for c in walker:
            if len(commits) >= limit:
                break
            oid = str(c.id)
            commits.append(
                CommitRecord(
                    hash=oid,
                    parent_hashes=[str(p) for p in c.parent_ids],
                    ref_names=decorations.get(oid, []),
                    short_hash=oid[:SHORT_HASH_LENGTH],
                    message=c.message.strip().split("\n")[0],
                    author=c.author.name,
                    date=_format_commit_date(c),
                )
            )
        return commits


def _format_commit_date(commit: pygit2.Commit) -> str:
    """Commit time as ISO 8601 in the committer's own offset"""
    tz = timezone(timedelta(minutes=commit.commit_time_offset))
    return datetime.fromtimestamp(commit.commit_time, tz=tz).isoformat()
