"""CLI entry point for the test failure determiner."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from failure_determiner.config import SuppressionConfig
from failure_determiner.determiner import FailureDeterminer
from failure_determiner.report import (
    exit_code,
    format_output,
    log_determination_summary,
)
from failure_determiner.results_loader import gather_results


def build_config(
    config_json: str | None, suppress_failures: bool, suppress_flaky: bool
) -> SuppressionConfig:
    """Build the suppression config; command line flags can only enable a policy.

    Raises:
        ValueError: If the JSON is malformed, not an object, or has unknown keys

    """
    config_dict = json.loads(config_json) if config_json else {}
    if not isinstance(config_dict, dict):
        raise ValueError("Suppression config must be a JSON object")
    config = SuppressionConfig(**config_dict)
    return config.model_copy(
        update={
            "suppress_failures": config.suppress_failures or suppress_failures,
            "suppress_flaky": config.suppress_flaky or suppress_flaky,
        }
    )


async def run(results_path: Path, config: SuppressionConfig) -> int:
    """Determine failures for a results file and return exit code."""
    log = logging.getLogger("failure_determiner")

    log.info(
        "Determining failures (suppress_failures=%s, suppress_flaky=%s)",
        config.suppress_failures,
        config.suppress_flaky,
    )
    outcome = await gather_results(results_path)

    determiner = FailureDeterminer(config=config)
    result = determiner.determine(outcome)

    log_determination_summary(log, result)

    output = format_output(result)
    print(json.dumps(output, indent=2))

    return exit_code(result)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Decide whether a CI test run failed, applying suppression"
    )
    parser.add_argument(
        "--results",
        type=Path,
        required=True,
        help="Path to the test results document (YAML or JSON)",
    )
    parser.add_argument(
        "--suppress-failures",
        action="store_true",
        help="Suppress every failed test",
    )
    parser.add_argument(
        "--suppress-flaky",
        action="store_true",
        help="Suppress failed tests marked flaky",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON suppression configuration",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(
            args.config, args.suppress_failures, args.suppress_flaky
        )
    except ValueError as e:
        parser.error(f"invalid --config: {e}")
    sys.exit(asyncio.run(run(results_path=args.results, config=config)))


if __name__ == "__main__":  # pragma: no cover
    main()
