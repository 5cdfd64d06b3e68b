"""Shared fixtures: throwaway repositories built with pygit2."""

from dataclasses import dataclass

import pygit2
import pytest


@dataclass
class SampleRepo:
    path: str
    repo: pygit2.Repository
    oids: dict[str, str]


def make_commit(repo: pygit2.Repository, message: str, parents: list[pygit2.Oid], time: int) -> pygit2.Oid:
    sig = pygit2.Signature("Test", "test@example.com", time, 0)
    tree = repo.TreeBuilder().write()
    return repo.create_commit(None, sig, sig, message, tree, parents)


@pytest.fixture
def sample_repo(tmp_path) -> SampleRepo:
    """
    wip    o        (refs/heads/wip)
           |
    main   |  o     (HEAD -> main, merge of feature)
           | /|
    feature|/ o     (refs/heads/feature)
           o  |
           | /
    root   o        (tag: v1.0)
    """
    path = str(tmp_path / "repo")
    repo = pygit2.init_repository(path)

    root = make_commit(repo, "Initial commit", [], 1_000)
    main_work = make_commit(repo, "Main work", [root], 2_000)
    feature = make_commit(repo, "Feature work", [root], 3_000)
    merge = make_commit(repo, "Merge feature\n\nLonger body", [main_work, feature], 4_000)
    wip = make_commit(repo, "Work in progress", [main_work], 5_000)

    repo.references.create("refs/heads/main", merge)
    repo.references.create("refs/heads/feature", feature)
    repo.references.create("refs/heads/wip", wip)
    repo.references.create("refs/tags/v1.0", root)
    repo.set_head("refs/heads/main")

    oids = {
        "root": str(root),
        "main_work": str(main_work),
        "feature": str(feature),
        "merge": str(merge),
        "wip": str(wip),
    }
    return SampleRepo(path=path, repo=repo, oids=oids)
