from .core import play_session
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["play_session", "write_csv", "write_manifest", "timestamp_id", "git_commit_or_unknown"]
