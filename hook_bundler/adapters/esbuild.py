"""esbuild adapter for the bundler port.

Runs the esbuild CLI as a subprocess. The option set mirrors the JS build
API call it replaces: bundle everything, target node, inline ``.wasm`` as
binary, minify while keeping names, and define ``process.env.NODE_ENV``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from hook_bundler.core.errors import BundleError, BundlerNotFoundError
from hook_bundler.core.models import BundleOptions
from hook_bundler.core.paths import normalize_path

logger = logging.getLogger(__name__)

# Lines of esbuild stderr kept in error messages
_STDERR_TAIL_LINES = 20


def resolve_esbuild(
    project_root: Path,
    explicit: Path | None = None,
) -> Path:
    """Locate the esbuild executable.

    Resolution order: explicit path, ``<project_root>/node_modules/.bin``,
    then ``PATH``.

    Args:
        project_root: Directory whose node_modules is searched.
        explicit: Path from configuration, used as-is when given.

    Returns:
        Path to the executable.

    Raises:
        BundlerNotFoundError: If nothing usable is found.
    """
    searched: list[str] = []

    if explicit is not None:
        candidate = normalize_path(explicit)
        if candidate.is_file():
            return candidate
        raise BundlerNotFoundError([str(candidate)])

    bin_dir = normalize_path(project_root) / "node_modules" / ".bin"
    names = ["esbuild.cmd", "esbuild"] if os.name == "nt" else ["esbuild"]
    for name in names:
        candidate = bin_dir / name
        searched.append(str(candidate))
        if candidate.is_file():
            return candidate

    searched.append("PATH")
    found = shutil.which("esbuild")
    if found:
        return Path(found)

    raise BundlerNotFoundError(searched)


def build_esbuild_args(
    entry_point: Path,
    outfile: Path,
    options: BundleOptions,
) -> list[str]:
    """Translate BundleOptions into esbuild CLI arguments.

    Args:
        entry_point: Source file to bundle.
        outfile: Artifact destination.
        options: Fixed bundle configuration.

    Returns:
        Argument list (without the executable).
    """
    args = [
        str(entry_point),
        "--bundle",
        f"--platform={options.platform}",
        f"--target={options.target}",
        f"--format={options.format}",
        f"--outfile={outfile}",
    ]
    for ext, loader in sorted(options.loaders.items()):
        args.append(f"--loader:{ext}={loader}")
    for module in options.external:
        args.append(f"--external:{module}")
    if options.minify:
        args.append("--minify")
    if options.keep_names:
        args.append("--keep-names")
    for key, value in sorted(options.define.items()):
        args.append(f"--define:{key}={value}")
    args.append("--log-level=warning")
    return args


def _tail(text: str, lines: int = _STDERR_TAIL_LINES) -> str:
    stripped = text.strip().splitlines()
    return "\n".join(stripped[-lines:])


class EsbuildBundler:
    """Bundler port implementation backed by the esbuild CLI.

    The executable is located on first use, so a build whose bundle
    entries are all absent never needs esbuild installed.
    """

    def __init__(
        self,
        options: BundleOptions,
        project_root: Path,
        executable: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            options: Fixed bundle configuration applied to every entry.
            project_root: Working directory for esbuild and node_modules lookup.
            executable: Explicit esbuild binary (see resolve_esbuild).
            timeout: Optional per-entry timeout in seconds.
        """
        self.options = options
        self.project_root = project_root
        self.timeout = timeout
        self._explicit = executable
        self._executable: Path | None = None

    @property
    def executable(self) -> Path:
        if self._executable is None:
            self._executable = resolve_esbuild(self.project_root, self._explicit)
            logger.debug(f"Using esbuild at {self._executable}")
        return self._executable

    def command(self, entry_point: Path, outfile: Path) -> list[str]:
        return [str(self.executable), *build_esbuild_args(entry_point, outfile, self.options)]

    def bundle(self, entry_point: Path, outfile: Path) -> None:
        """Run esbuild once for one entry point.

        Raises:
            BundlerNotFoundError: If esbuild cannot be located or started.
            BundleError: On non-zero exit or timeout.
        """
        name = entry_point.name
        cmd = self.command(entry_point, outfile)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                cwd=str(self.project_root),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise BundlerNotFoundError([cmd[0]]) from e
        except subprocess.TimeoutExpired as e:
            raise BundleError(
                f"esbuild timed out after {self.timeout}s bundling {name}", name=name
            ) from e
        except OSError as e:
            raise BundleError(f"Could not run esbuild for {name}: {e}", name=name) from e

        if proc.stderr.strip():
            logger.debug(proc.stderr.strip())

        if proc.returncode != 0:
            detail = _tail(proc.stderr) or f"exit status {proc.returncode}"
            raise BundleError(f"esbuild failed for {name}:\n{detail}", name=name)
