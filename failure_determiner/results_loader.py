"""Load test run results produced by the test-execution step."""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from failure_determiner.models.result import (
    GatherError,
    GatherOutcome,
    GatherSuccess,
    TestRunResult,
    TestRunResults,
)

log = logging.getLogger(__name__)


async def load_test_results(results_path: Path) -> Sequence[TestRunResult]:
    """Load and validate a results document.

    JSON documents are accepted as well, since JSON is a subset of YAML.

    Args:
        results_path: Path to the results file

    Returns:
        Test results in document order

    Raises:
        FileNotFoundError: If the results file does not exist
        ValueError: If the file is not valid YAML or does not match the schema

    """
    if not results_path.is_file():
        raise FileNotFoundError(f"Results file not found: {results_path}")

    content = await asyncio.to_thread(results_path.read_text)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {results_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {results_path}")

    try:
        document = TestRunResults.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid results document {results_path}: {e}") from e

    log.info("Loaded %d test result(s) from %s", len(document.tests), results_path)
    return tuple(document.tests)


async def gather_results(results_path: Path) -> GatherOutcome:
    """Load results, capturing any failure as a value instead of raising."""
    try:
        results = await load_test_results(results_path)
    except Exception as e:
        log.error("Failed to gather test results: %s", e, exc_info=e)
        return GatherError(error=e)
    return GatherSuccess(results=results)
