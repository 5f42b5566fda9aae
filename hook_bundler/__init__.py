"""Hook Bundler - bundle hook scripts into self-contained distributable files."""

__version__ = "0.1.0"

# Re-export core components for convenience
from hook_bundler.config import Settings, get_settings
from hook_bundler.core import (
    BuildAbortedError,
    BuildReport,
    BundleError,
    BundleOptions,
    BundlerNotFoundError,
    CheckResult,
    ConfigurationError,
    EntryResult,
    EntryStatus,
    HookBundlerError,
    HookPaths,
    OutputDirectoryError,
    ValidationError,
)
from hook_bundler.factory import ServiceFactory
from hook_bundler.services import HookBuildService

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "HookBundlerError",
    "ConfigurationError",
    "ValidationError",
    "OutputDirectoryError",
    "BundleError",
    "BundlerNotFoundError",
    "BuildAbortedError",
    # Models
    "BundleOptions",
    "BuildReport",
    "CheckResult",
    "EntryResult",
    "EntryStatus",
    "HookPaths",
    # Services
    "HookBuildService",
    "ServiceFactory",
]
