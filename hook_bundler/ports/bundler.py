"""Protocol interface for the bundling capability.

The build service depends on this protocol, not on the esbuild adapter,
so tests can substitute an in-process bundler.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class BundlerPort(Protocol):
    """Turns one entry point into one self-contained artifact.

    Consumer: HookBuildService.bundle_hooks()
    """

    def bundle(self, entry_point: Path, outfile: Path) -> None:
        """Bundle ``entry_point`` and its dependency graph into ``outfile``.

        Args:
            entry_point: Existing source file to bundle.
            outfile: Destination of the artifact (parent directory exists).

        Raises:
            BundleError: If the bundler fails for any reason.
        """
        ...
