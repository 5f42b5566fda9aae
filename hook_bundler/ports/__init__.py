"""Port interfaces for the hook bundler."""

from hook_bundler.ports.bundler import BundlerPort

__all__ = [
    "BundlerPort",
]
