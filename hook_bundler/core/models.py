"""Data models for the hook bundler."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hook_bundler.core.utils import utc_now


class BuildStep(str, Enum):
    """Which step handled an entry."""

    BUNDLE = "bundle"
    COPY = "copy"


class EntryStatus(str, Enum):
    """Outcome of a single hook entry."""

    PROCESSED = "processed"  # Input present, artifact written
    SKIPPED = "skipped"  # Input absent, nothing written
    FAILED = "failed"  # Input present, operation failed


class BundleOptions(BaseModel):
    """Fixed esbuild configuration shared by every bundled entry.

    Nothing is externalized: every dependency reachable from the entry point
    is inlined, and ``.wasm`` payloads are embedded through the binary loader
    so the artifact has no sidecar files.
    """

    model_config = ConfigDict(frozen=True)

    platform: str = "node"
    target: str = "node18"
    format: Literal["cjs", "esm", "iife"] = "cjs"
    loaders: dict[str, str] = Field(default_factory=lambda: {".wasm": "binary"})
    external: list[str] = Field(default_factory=list)
    minify: bool = True
    keep_names: bool = True
    define: dict[str, str] = Field(
        default_factory=lambda: {"process.env.NODE_ENV": '"production"'}
    )


class EntryResult(BaseModel):
    """Result of bundling or copying one hook."""

    name: str
    step: BuildStep
    status: EntryStatus
    source: Path
    output: Path | None = None
    sha256: str | None = None
    error: str | None = None


class BuildReport(BaseModel):
    """Per-entry outcomes of a build run, in processing order."""

    hooks_dir: Path
    dist_dir: Path
    started_at: datetime = Field(default_factory=utc_now)
    finished_at: datetime | None = None
    results: list[EntryResult] = Field(default_factory=list)

    def add(self, result: EntryResult) -> EntryResult:
        self.results.append(result)
        return result

    def count(self, status: EntryStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def succeeded(self) -> bool:
        return all(r.status != EntryStatus.FAILED for r in self.results)

    @property
    def skipped_names(self) -> list[str]:
        return [r.name for r in self.results if r.status == EntryStatus.SKIPPED]

    @property
    def outputs(self) -> list[Path]:
        return [r.output for r in self.results if r.output is not None]

    def summary(self) -> dict[str, int]:
        """Counts per status plus the total number of entries seen."""
        return {
            "total": len(self.results),
            "processed": self.count(EntryStatus.PROCESSED),
            "skipped": self.count(EntryStatus.SKIPPED),
            "failed": self.count(EntryStatus.FAILED),
        }


class CheckResult(BaseModel):
    """Comparison of the output directory against the hook sources."""

    dist_dir: Path
    missing: list[str] = Field(default_factory=list)
    out_of_sync: list[str] = Field(default_factory=list)
    sidecars: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.missing or self.out_of_sync or self.sidecars)
