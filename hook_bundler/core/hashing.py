"""Content hashing for build artifacts.

Hashes are recorded in the build report and used by the dist check to
compare copied hooks against their sources.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

_CHUNK_SIZE = 1 << 20


def compute_file_hash(path: Path) -> str:
    """Compute the SHA-256 hash of a file's bytes.

    Args:
        path: File to hash.

    Returns:
        Hex-encoded SHA-256 hash string.
    """
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()
