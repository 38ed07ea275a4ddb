"""Classification of a test run into failed / not failed with suppression."""

from collections.abc import Sequence
from dataclasses import dataclass

from failure_determiner.config import SuppressionConfig
from failure_determiner.models.determination import (
    DeterminationResult,
    DetermineError,
    Failed,
    NoFailed,
    NoSuppression,
    SuppressedAll,
    SuppressedFlaky,
    Suppression,
)
from failure_determiner.models.result import (
    GatherError,
    GatherOutcome,
    GatherSuccess,
    TestRunResult,
)


def determine(
    outcome: GatherOutcome, config: SuppressionConfig
) -> DeterminationResult:
    """Classify gathered test results under the given suppression policy.

    Args:
        outcome: Gathered results, or the error raised while gathering them
        config: Suppression flags

    Returns:
        ``DetermineError`` carrying the gathering error unchanged,
        ``NoFailed`` when no test failed, otherwise ``Failed`` with the
        failed tests and the suppression applied to them

    """
    match outcome:
        case GatherError(error=error):
            return DetermineError(error=error)
        case GatherSuccess(results=results):
            failed = tuple(test for test in results if not test.is_successful)
            if not failed:
                return NoFailed()
            return Failed(
                failed=failed, suppression=select_suppression(failed, config)
            )


def select_suppression(
    failed: Sequence[TestRunResult], config: SuppressionConfig
) -> Suppression:
    """Pick the suppression for ``failed``; the first matching flag wins."""
    if config.suppress_failures:
        return SuppressedAll(tests=tuple(failed))
    if config.suppress_flaky:
        return SuppressedFlaky(tests=tuple(test for test in failed if test.is_flaky))
    return NoSuppression()


@dataclass(frozen=True, kw_only=True)
class FailureDeterminer:
    """Determiner bound to a fixed suppression policy."""

    config: SuppressionConfig

    def determine(self, outcome: GatherOutcome) -> DeterminationResult:
        return determine(outcome, self.config)
