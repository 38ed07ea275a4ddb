"""Suppression policy configuration."""

from pydantic import Field

from failure_determiner.models.base import Model


class SuppressionConfig(Model):
    """Policy flags deciding which failed tests are ignored.

    The flags are independent; when both are set ``suppress_failures`` wins.
    """

    suppress_failures: bool = Field(
        default=False, description="Suppress every failed test"
    )
    suppress_flaky: bool = Field(
        default=False, description="Suppress failed tests marked flaky"
    )
