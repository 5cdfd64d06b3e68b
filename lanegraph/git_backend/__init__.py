"""Git backend for reading commit history"""

from lanegraph.git_backend.repository import CommitLogRepository

__all__ = ["CommitLogRepository"]
