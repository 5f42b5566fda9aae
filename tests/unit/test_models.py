"""Unit tests for report models and file hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from hook_bundler.core.hashing import compute_file_hash
from hook_bundler.core.models import (
    BuildReport,
    BuildStep,
    BundleOptions,
    CheckResult,
    EntryResult,
    EntryStatus,
)


def _entry(name: str, status: EntryStatus, step: BuildStep = BuildStep.COPY) -> EntryResult:
    return EntryResult(name=name, step=step, status=status, source=Path("/hooks") / name)


@pytest.mark.unit
class TestBuildReport:
    def test_empty_report_succeeds(self) -> None:
        report = BuildReport(hooks_dir=Path("/hooks"), dist_dir=Path("/hooks/dist"))

        assert report.succeeded
        assert report.summary() == {"total": 0, "processed": 0, "skipped": 0, "failed": 0}
        assert report.finished_at is None

    def test_skips_do_not_fail(self) -> None:
        report = BuildReport(hooks_dir=Path("/hooks"), dist_dir=Path("/hooks/dist"))
        report.add(_entry("a.js", EntryStatus.PROCESSED, BuildStep.BUNDLE))
        report.add(_entry("b.js", EntryStatus.SKIPPED))

        assert report.succeeded
        assert report.skipped_names == ["b.js"]

    def test_failure(self) -> None:
        report = BuildReport(hooks_dir=Path("/hooks"), dist_dir=Path("/hooks/dist"))
        report.add(_entry("a.js", EntryStatus.FAILED, BuildStep.BUNDLE))

        assert not report.succeeded
        assert report.count(EntryStatus.FAILED) == 1

    def test_outputs(self) -> None:
        report = BuildReport(hooks_dir=Path("/hooks"), dist_dir=Path("/hooks/dist"))
        written = EntryResult(
            name="c.js",
            step=BuildStep.COPY,
            status=EntryStatus.PROCESSED,
            source=Path("/hooks/c.js"),
            output=Path("/hooks/dist/c.js"),
        )
        report.add(written)
        report.add(_entry("b.js", EntryStatus.SKIPPED))

        assert report.outputs == [Path("/hooks/dist/c.js")]

    def test_json_uses_enum_values(self) -> None:
        report = BuildReport(hooks_dir=Path("/hooks"), dist_dir=Path("/hooks/dist"))
        report.add(_entry("b.js", EntryStatus.SKIPPED))

        data = report.model_dump(mode="json")
        assert data["results"][0]["status"] == "skipped"
        assert data["results"][0]["step"] == "copy"


@pytest.mark.unit
class TestBundleOptions:
    def test_frozen(self) -> None:
        options = BundleOptions()
        with pytest.raises(PydanticValidationError):
            options.minify = False  # type: ignore[misc]

    def test_defaults_are_not_shared(self) -> None:
        a = BundleOptions()
        b = BundleOptions()
        assert a.loaders == b.loaders
        assert a.loaders is not b.loaders


@pytest.mark.unit
class TestCheckResult:
    def test_ok(self) -> None:
        assert CheckResult(dist_dir=Path("/d")).ok

    @pytest.mark.parametrize("field", ["missing", "out_of_sync", "sidecars"])
    def test_any_finding_fails(self, field: str) -> None:
        result = CheckResult(dist_dir=Path("/d"), **{field: ["x"]})
        assert not result.ok


@pytest.mark.unit
class TestComputeFileHash:
    def test_matches_hashlib(self, tmp_path: Path) -> None:
        data = b"#!/usr/bin/env node\r\n\xe2\x9c\x93" * 1000
        path = tmp_path / "a.js"
        path.write_bytes(data)

        assert compute_file_hash(path) == hashlib.sha256(data).hexdigest()

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.js"
        path.write_bytes(b"")

        assert compute_file_hash(path) == hashlib.sha256(b"").hexdigest()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            compute_file_hash(tmp_path / "nope.js")
