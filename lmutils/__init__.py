from importlib.resources import files

from .arithmetic import addition, subtraction
from .relative import Bucket, Elapsed, ago, classify, how_long_ago, to_timestamp

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "addition",
    "subtraction",
    "how_long_ago",
    "ago",
    "classify",
    "to_timestamp",
    "Bucket",
    "Elapsed",
    "docs",
]
