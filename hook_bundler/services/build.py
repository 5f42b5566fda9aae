"""Hook build service.

Runs the build as one linear pass:

1. validate the hook lists and create the output directory,
2. bundle each BundleList entry through the bundler port,
3. copy each CopyList entry verbatim.

A missing input is recorded as skipped and logged as a warning. Any other
failure is recorded as failed and aborts the run with BuildAbortedError;
artifacts written before it stay on disk.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from hook_bundler.core.errors import (
    BuildAbortedError,
    BundleError,
    CopyError,
    OutputDirectoryError,
    StorageError,
)
from hook_bundler.core.hashing import compute_file_hash
from hook_bundler.core.models import (
    BuildReport,
    BuildStep,
    CheckResult,
    EntryResult,
    EntryStatus,
)
from hook_bundler.core.paths import HookPaths, validate_hook_lists
from hook_bundler.core.utils import utc_now
from hook_bundler.ports.bundler import BundlerPort

logger = logging.getLogger(__name__)


class HookBuildService:
    """Bundles and copies hook scripts into the output directory."""

    def __init__(
        self,
        paths: HookPaths,
        bundler: BundlerPort,
        hooks_to_bundle: list[str],
        hooks_to_copy: list[str],
    ) -> None:
        """Initialize the service.

        Args:
            paths: Name-to-path mapping for sources and outputs.
            bundler: Bundling capability used for hooks_to_bundle.
            hooks_to_bundle: Hooks with dependencies, in processing order.
            hooks_to_copy: Dependency-free hooks, in processing order.
        """
        self._paths = paths
        self._bundler = bundler
        self._hooks_to_bundle = list(hooks_to_bundle)
        self._hooks_to_copy = list(hooks_to_copy)

    @property
    def paths(self) -> HookPaths:
        return self._paths

    def prepare_output_dir(self) -> Path:
        """Ensure the output directory exists, creating parents as needed.

        Raises:
            OutputDirectoryError: If the directory cannot be created.
        """
        dist_dir = self._paths.dist_dir
        try:
            dist_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(dist_dir, e.strerror or str(e)) from e
        return dist_dir

    def _skip(self, report: BuildReport, name: str, step: BuildStep, src: Path) -> None:
        logger.warning(f"{name} not found, skipping")
        report.add(EntryResult(name=name, step=step, status=EntryStatus.SKIPPED, source=src))

    def _abort(
        self,
        report: BuildReport,
        name: str,
        step: BuildStep,
        src: Path,
        error: Exception,
    ) -> BuildAbortedError:
        report.add(
            EntryResult(
                name=name,
                step=step,
                status=EntryStatus.FAILED,
                source=src,
                error=str(error),
            )
        )
        report.finished_at = utc_now()
        return BuildAbortedError(str(error), report)

    def bundle_hooks(self, report: BuildReport) -> None:
        """Bundle every hook in the bundle list, in order.

        Raises:
            BuildAbortedError: If the bundler fails for an entry or its
                output cannot be read back.
        """
        for name in self._hooks_to_bundle:
            src = self._paths.source(name)
            dest = self._paths.output(name)

            if not src.exists():
                self._skip(report, name, BuildStep.BUNDLE, src)
                continue

            logger.info(f"Bundling {name}...")
            try:
                self._bundler.bundle(src, dest)
                if not dest.is_file():
                    raise BundleError(f"Bundler produced no output for {name}", name=name)
            except BundleError as e:
                raise self._abort(report, name, BuildStep.BUNDLE, src, e) from e
            except Exception as e:
                error = BundleError(
                    f"Bundler failed for {name}: {type(e).__name__}: {e}", name=name
                )
                raise self._abort(report, name, BuildStep.BUNDLE, src, error) from e

            try:
                digest = compute_file_hash(dest)
            except OSError as e:
                error = StorageError(
                    f"Failed to read bundled output for {name}: {e.strerror or e}"
                )
                raise self._abort(report, name, BuildStep.BUNDLE, src, error) from e

            report.add(
                EntryResult(
                    name=name,
                    step=BuildStep.BUNDLE,
                    status=EntryStatus.PROCESSED,
                    source=src,
                    output=dest,
                    sha256=digest,
                )
            )
            logger.info(f"  -> {dest}")

    def copy_hooks(self, report: BuildReport) -> None:
        """Copy every hook in the copy list byte-for-byte, in order.

        Raises:
            BuildAbortedError: If reading or writing a hook fails.
        """
        for name in self._hooks_to_copy:
            src = self._paths.source(name)
            dest = self._paths.output(name)

            if not src.exists():
                self._skip(report, name, BuildStep.COPY, src)
                continue

            logger.info(f"Copying {name}...")
            try:
                shutil.copyfile(src, dest)
                digest = compute_file_hash(dest)
            except OSError as e:
                error = CopyError(name, e.strerror or str(e))
                raise self._abort(report, name, BuildStep.COPY, src, error) from e

            report.add(
                EntryResult(
                    name=name,
                    step=BuildStep.COPY,
                    status=EntryStatus.PROCESSED,
                    source=src,
                    output=dest,
                    sha256=digest,
                )
            )
            logger.info(f"  -> {dest}")

    def run(self) -> BuildReport:
        """Run the full build.

        Returns:
            Report with one result per entry in both lists.

        Raises:
            ConfigurationError: If the hook lists overlap or repeat a name.
            ValidationError: If a hook name is not a bare file name.
            OutputDirectoryError: If the output directory cannot be created.
            BuildAbortedError: If bundling or copying an entry fails.
        """
        validate_hook_lists(self._hooks_to_bundle, self._hooks_to_copy)

        report = BuildReport(hooks_dir=self._paths.hooks_dir, dist_dir=self._paths.dist_dir)
        self.prepare_output_dir()
        self.bundle_hooks(report)
        self.copy_hooks(report)
        report.finished_at = utc_now()

        logger.info("Build complete.")
        return report

    def check(self) -> CheckResult:
        """Compare the output directory with the sources without writing.

        Copied hooks must match their source byte-for-byte, bundled hooks
        must exist, and no ``.wasm`` sidecar may sit next to the artifacts.
        Entries whose source is absent are ignored.
        """
        validate_hook_lists(self._hooks_to_bundle, self._hooks_to_copy)
        result = CheckResult(dist_dir=self._paths.dist_dir)

        for name in self._hooks_to_bundle:
            if not self._paths.source(name).exists():
                continue
            if not self._paths.output(name).is_file():
                result.missing.append(name)

        for name in self._hooks_to_copy:
            src = self._paths.source(name)
            if not src.exists():
                continue
            dest = self._paths.output(name)
            if not dest.is_file():
                result.missing.append(name)
            elif compute_file_hash(src) != compute_file_hash(dest):
                result.out_of_sync.append(name)

        if self._paths.dist_dir.is_dir():
            result.sidecars = sorted(p.name for p in self._paths.dist_dir.glob("*.wasm"))

        return result
