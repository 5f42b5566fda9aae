"""Core components for the hook bundler."""

from hook_bundler.core.errors import (
    BuildAbortedError,
    BundleError,
    BundlerNotFoundError,
    ConfigurationError,
    CopyError,
    HookBundlerError,
    OutputDirectoryError,
    StorageError,
    ValidationError,
)
from hook_bundler.core.models import (
    BuildReport,
    BuildStep,
    BundleOptions,
    CheckResult,
    EntryResult,
    EntryStatus,
)
from hook_bundler.core.paths import HookPaths, validate_hook_lists, validate_hook_name

__all__ = [
    # Errors
    "HookBundlerError",
    "ConfigurationError",
    "ValidationError",
    "StorageError",
    "OutputDirectoryError",
    "CopyError",
    "BundleError",
    "BundlerNotFoundError",
    "BuildAbortedError",
    # Models
    "BuildReport",
    "BuildStep",
    "BundleOptions",
    "CheckResult",
    "EntryResult",
    "EntryStatus",
    # Paths
    "HookPaths",
    "validate_hook_lists",
    "validate_hook_name",
]
