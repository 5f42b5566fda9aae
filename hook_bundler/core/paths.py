"""Path mapping and hook list validation.

Each hook name maps to exactly one source path and one output path. Names
must be bare file names so that two names can never resolve to the same
file.
"""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from hook_bundler.core.errors import ConfigurationError, ValidationError


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables, keeping relative paths relative."""
    return Path(os.path.expandvars(os.path.expanduser(str(path))))


def normalize_path(path: str | Path) -> Path:
    """Normalize a filesystem path.

    Expands ~ and environment variables and resolves symlinks.

    Args:
        path: Path to normalize.

    Returns:
        Normalized absolute Path.
    """
    p = expand_path(path)
    try:
        p = p.resolve()
    except OSError:
        p = p.absolute()
    return p


def validate_hook_name(name: str) -> str:
    """Check that a hook name is a bare file name.

    Args:
        name: Hook name from one of the hook lists.

    Returns:
        The name, unchanged.

    Raises:
        ValidationError: If the name is empty, a dot entry, or contains a
            path separator.
    """
    if not name or not name.strip():
        raise ValidationError("Hook name cannot be empty")
    if name in (".", ".."):
        raise ValidationError(f"Invalid hook name: {name!r}")
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        raise ValidationError(f"Hook name must not contain a path separator: {name!r}")
    return name


def validate_hook_lists(to_bundle: list[str], to_copy: list[str]) -> None:
    """Validate both hook lists before anything is written.

    Raises:
        ValidationError: If any name is not a bare file name.
        ConfigurationError: If a name repeats within a list or appears in both.
    """
    for name in [*to_bundle, *to_copy]:
        validate_hook_name(name)

    for label, names in (("bundle", to_bundle), ("copy", to_copy)):
        repeated = sorted(n for n, c in Counter(names).items() if c > 1)
        if repeated:
            raise ConfigurationError(
                f"Duplicate entries in {label} list: {', '.join(repeated)}"
            )

    copy_names = set(to_copy)
    overlap = [name for name in to_bundle if name in copy_names]
    if overlap:
        raise ConfigurationError(
            "Hooks listed for both bundling and copying: " + ", ".join(overlap)
        )


@dataclass(frozen=True)
class HookPaths:
    """Maps hook names to their source and output paths."""

    hooks_dir: Path
    dist_dir: Path

    def source(self, name: str) -> Path:
        return self.hooks_dir / validate_hook_name(name)

    def output(self, name: str) -> Path:
        return self.dist_dir / validate_hook_name(name)
