"""Tests for results loader."""

import json
from pathlib import Path

import pytest

from failure_determiner.models.result import GatherError, GatherSuccess, TestRunResult
from failure_determiner.results_loader import gather_results, load_test_results


class TestLoadTestResults:
    """Tests for load_test_results function."""

    async def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads and parses a valid results file."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text(
            """
version: "1.0"
tests:
  - name: "com.example.LoginTest.testLogin"
    status: "success"
  - name: "com.example.CartTest.testCheckout"
    status: "failure"
    flakiness: "flaky"
    flaky_reason: "network"
"""
        )

        results = await load_test_results(results_file)

        assert results == (
            TestRunResult(name="com.example.LoginTest.testLogin", status="success"),
            TestRunResult(
                name="com.example.CartTest.testCheckout",
                status="failure",
                flakiness="flaky",
                flaky_reason="network",
            ),
        )

    async def test_loads_json(self, tmp_path: Path) -> None:
        """Accepts JSON documents."""
        results_file = tmp_path / "results.json"
        results_file.write_text(
            json.dumps(
                {"version": "1.0", "tests": [{"name": "a", "status": "lost"}]}
            )
        )

        results = await load_test_results(results_file)

        assert results == (TestRunResult(name="a", status="lost"),)

    async def test_loads_empty_test_list(self, tmp_path: Path) -> None:
        """Returns no results when the document lists no tests."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text('version: "1.0"\n')

        assert list(await load_test_results(results_file)) == []

    async def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for a missing results file."""
        with pytest.raises(FileNotFoundError, match="Results file not found"):
            await load_test_results(tmp_path / "missing.yaml")

    async def test_raises_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ValueError for malformed YAML."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            await load_test_results(results_file)

    async def test_raises_for_non_mapping(self, tmp_path: Path) -> None:
        """Raises ValueError when the document is not a mapping."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="Expected a mapping"):
            await load_test_results(results_file)

    async def test_raises_for_unknown_status(self, tmp_path: Path) -> None:
        """Raises ValueError for results that do not match the schema."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text(
            'version: "1.0"\ntests:\n  - name: "a"\n    status: "exploded"\n'
        )

        with pytest.raises(ValueError, match="Invalid results document"):
            await load_test_results(results_file)


class TestGatherResults:
    """Tests for gather_results function."""

    async def test_returns_success(self, tmp_path: Path) -> None:
        """Wraps loaded results in GatherSuccess."""
        results_file = tmp_path / "results.yaml"
        results_file.write_text(
            'version: "1.0"\ntests:\n  - name: "a"\n    status: "success"\n'
        )

        outcome = await gather_results(results_file)

        assert outcome == GatherSuccess(
            results=(TestRunResult(name="a", status="success"),)
        )

    async def test_captures_error(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Captures loading errors as GatherError instead of raising."""
        outcome = await gather_results(tmp_path / "missing.yaml")

        assert isinstance(outcome, GatherError)
        assert isinstance(outcome.error, FileNotFoundError)
        assert "Failed to gather test results" in caplog.text
