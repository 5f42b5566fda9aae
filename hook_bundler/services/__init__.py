"""Service layer for the hook bundler."""

from hook_bundler.services.build import HookBuildService

__all__ = [
    "HookBuildService",
]
