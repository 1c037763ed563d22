"""SHA-256 content hashing for skipping unchanged output files"""

import hashlib
from pathlib import Path


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def file_matches(path: Path, content: str) -> bool:
    """True when path exists and already holds exactly content."""
    return path.is_file() and sha256(path.read_text(encoding="utf-8")) == sha256(content)
