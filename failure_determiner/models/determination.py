"""Result variants produced by the failure determiner."""

from dataclasses import dataclass, field
from functools import cached_property
from typing import ClassVar, TypeAlias

from failure_determiner.models.result import TestRunResult


@dataclass(frozen=True, kw_only=True)
class NoSuppression:
    """No failed test is suppressed."""

    tests: ClassVar[tuple[TestRunResult, ...]] = ()

    def __str__(self) -> str:
        return "No suppressed tests"


@dataclass(frozen=True, kw_only=True)
class SuppressedAll:
    """Every failed test is suppressed by configuration."""

    tests: tuple[TestRunResult, ...]

    def __str__(self) -> str:
        return "Suppressed all by flag in build configuration"


@dataclass(frozen=True, kw_only=True)
class SuppressedFlaky:
    """Only failed tests marked flaky are suppressed."""

    tests: tuple[TestRunResult, ...]

    def __str__(self) -> str:
        return "Suppressed all flaky tests"


Suppression: TypeAlias = NoSuppression | SuppressedAll | SuppressedFlaky


@dataclass(frozen=True, kw_only=True)
class DetermineError:
    """Gathering the results failed, so nothing could be determined."""

    error: BaseException

    def count(self) -> int:
        return 0


@dataclass(frozen=True, kw_only=True)
class NoFailed:
    """Every gathered test passed."""

    def count(self) -> int:
        return 0


@dataclass(frozen=True, kw_only=True)
class Failed:
    """At least one test failed.

    ``failed`` always holds the complete failed set; ``suppression`` records
    which of those tests are ignored and why.
    """

    failed: tuple[TestRunResult, ...]
    suppression: Suppression = field(default_factory=NoSuppression)

    def count(self) -> int:
        return len(self.failed)

    @cached_property
    def suppressed(self) -> frozenset[TestRunResult]:
        return frozenset(self.suppression.tests)

    def is_suppressed(self, test: TestRunResult) -> bool:
        return test in self.suppressed

    @cached_property
    def not_suppressed(self) -> tuple[TestRunResult, ...]:
        """Failed tests not covered by the suppression, in ``failed`` order."""
        return tuple(test for test in self.failed if test not in self.suppressed)

    @property
    def not_suppressed_count(self) -> int:
        return len(self.not_suppressed)


DeterminationResult: TypeAlias = DetermineError | NoFailed | Failed
