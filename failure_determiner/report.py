"""Gating decision and reporting for determination results."""

import logging
from typing import Any

from failure_determiner.models.determination import (
    DeterminationResult,
    DetermineError,
    Failed,
    NoFailed,
)

STATUS_SYMBOLS = {
    "no_failed": "✅",
    "failed": "❌",
    "suppressed": "⚠️",
    "error": "❗",
}


def is_passing(result: DeterminationResult) -> bool:
    """Whether the run passes: nothing failed, or every failure is suppressed."""
    match result:
        case NoFailed():
            return True
        case Failed():
            return result.not_suppressed_count == 0
        case DetermineError():
            return False


def exit_code(result: DeterminationResult) -> int:
    """Exit code: 0 passing, 1 failing, 2 when results could not be gathered."""
    if isinstance(result, DetermineError):
        return 2
    return 0 if is_passing(result) else 1


def outcome_name(result: DeterminationResult) -> str:
    match result:
        case NoFailed():
            return "no_failed"
        case Failed():
            return "failed"
        case DetermineError():
            return "error"


def log_determination_summary(
    log: logging.Logger, result: DeterminationResult
) -> None:
    """Log a formatted summary of the determination."""
    log.info("=" * 80)
    log.info("Test Failure Summary:")
    log.info("=" * 80)

    match result:
        case NoFailed():
            log.info("%s No failed tests", STATUS_SYMBOLS["no_failed"])
        case DetermineError(error=error):
            log.info(
                "%s Could not determine failures: %s", STATUS_SYMBOLS["error"], error
            )
        case Failed(suppression=suppression):
            symbol = STATUS_SYMBOLS["suppressed" if is_passing(result) else "failed"]
            log.info(
                "%s %d failed, %d not suppressed",
                symbol,
                result.count(),
                result.not_suppressed_count,
            )
            log.info("  Suppression: %s", suppression)
            for test in result.failed:
                state = "suppressed" if result.is_suppressed(test) else "failed"
                log.info(
                    "  %s: %s (%s, %s)", test.name, state, test.status, test.flakiness
                )


def format_output(result: DeterminationResult) -> dict[str, Any]:
    """Format a determination for JSON output."""
    output: dict[str, Any] = {
        "outcome": outcome_name(result),
        "failed": result.count(),
        "suppressed": 0,
        "not_suppressed": 0,
        "suppression": None,
        "passing": is_passing(result),
        "error": None,
        "tests": [],
    }

    match result:
        case DetermineError(error=error):
            output["error"] = str(error)
        case Failed(suppression=suppression):
            output["suppressed"] = len(suppression.tests)
            output["not_suppressed"] = result.not_suppressed_count
            output["suppression"] = str(suppression)
            output["tests"] = [
                {
                    "name": test.name,
                    "status": test.status,
                    "flakiness": test.flakiness,
                    "suppressed": result.is_suppressed(test),
                }
                for test in result.failed
            ]

    return output
