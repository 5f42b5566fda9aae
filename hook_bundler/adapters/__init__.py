"""Infrastructure adapters for the hook bundler."""

from hook_bundler.adapters.esbuild import EsbuildBundler, build_esbuild_args, resolve_esbuild

__all__ = [
    "EsbuildBundler",
    "build_esbuild_args",
    "resolve_esbuild",
]
