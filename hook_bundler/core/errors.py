"""Custom exceptions for the hook bundler."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hook_bundler.core.models import BuildReport


class HookBundlerError(Exception):
    """Base exception for all hook bundler errors."""

    pass


class ConfigurationError(HookBundlerError):
    """Raised when configuration is invalid (e.g. overlapping hook lists)."""

    pass


class ValidationError(HookBundlerError):
    """Raised when input validation fails."""

    pass


class StorageError(HookBundlerError):
    """Raised when filesystem operations fail."""

    pass


class OutputDirectoryError(StorageError):
    """Raised when the output directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot create output directory {path}: {reason}")


class CopyError(StorageError):
    """Raised when a hook cannot be copied into the output directory."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Failed to copy {name}: {reason}")


class BundleError(HookBundlerError):
    """Raised when the bundler fails for an entry point."""

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class BundlerNotFoundError(BundleError):
    """Raised when no esbuild executable can be located."""

    def __init__(self, searched: list[str]) -> None:
        self.searched = searched
        super().__init__(
            "esbuild executable not found (searched: "
            + ", ".join(searched)
            + "). Run 'npm install' or set HOOK_BUNDLER_ESBUILD_PATH."
        )


class BuildAbortedError(HookBundlerError):
    """Raised when a fatal error stops the build part-way.

    Carries the report of everything attempted so far; artifacts written
    before the failure are left on disk.
    """

    def __init__(self, message: str, report: BuildReport) -> None:
        self.report = report
        super().__init__(message)
