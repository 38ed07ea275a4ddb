"""Models for individual test run results and the outcome of gathering them."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

from pydantic import Field

from failure_determiner.models.base import Model

TestStatus: TypeAlias = Literal["success", "failure", "skipped", "manual", "lost"]
Flakiness: TypeAlias = Literal["stable", "flaky"]

SUCCESSFUL_STATUSES: frozenset[TestStatus] = frozenset(
    {"success", "skipped", "manual"}
)


class TestRunResult(Model):
    """Execution record of a single test.

    Flakiness is assigned upstream; it is never derived from the status here.
    """

    __test__ = False

    name: str = Field(..., description="Test identifier")
    status: TestStatus = Field(..., description="Execution status")
    flakiness: Flakiness = Field(default="stable", description="Flakiness mark")
    flaky_reason: str | None = Field(
        default=None, description="Why the test is marked flaky"
    )

    @property
    def is_successful(self) -> bool:
        """Whether the status counts as a pass."""
        return self.status in SUCCESSFUL_STATUSES

    @property
    def is_flaky(self) -> bool:
        return self.flakiness == "flaky"


class TestRunResults(Model):
    """Results document produced by the test-execution step."""

    __test__ = False

    version: str = Field(..., description="Results document schema version")
    tests: Sequence[TestRunResult] = Field(
        default_factory=list, description="Per-test results"
    )


@dataclass(frozen=True, kw_only=True)
class GatherSuccess:
    """All results were collected."""

    results: Sequence[TestRunResult]


@dataclass(frozen=True, kw_only=True)
class GatherError:
    """Collecting results failed; the cause is kept as is."""

    error: BaseException


GatherOutcome: TypeAlias = GatherSuccess | GatherError
