"""Command-line entry point for exercising the StressMate core."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

from stressmate.chat import ChatIntentResolver
from stressmate.config.environment import EnvironmentConfig
from stressmate.config.exceptions import ConfigurationError
from stressmate.config.loader import load_config, validate_config_file
from stressmate.config.models import AppConfig
from stressmate.domain.models import Priority, StressResult
from stressmate.finance import FinanceAdvisor
from stressmate.fixtures import (
    DEFAULT_LEDGER,
    ledger_names,
    load_jobs,
    load_profile,
    load_transactions,
)
from stressmate.jobs import JobMatcher
from stressmate.logging import get_logger
from stressmate.logging.config import configure_logging
from stressmate.logging.context import log_context
from stressmate.stress import StressScorer

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load rule tables and settle the effective log level and format.

    Log level priority: CLI > environment > rule file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stressmate",
        description="StressMate - stress scoring, finance tips, job matching and chat replies",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a rule table file (default: packaged rules)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides rule file and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    stress = subparsers.add_parser("stress", help="Compute a stress score")
    _add_stress_arguments(stress)

    finance = subparsers.add_parser("finance", help="Summarize a bundled ledger")
    finance.add_argument(
        "--fixture",
        dest="ledger",
        default=DEFAULT_LEDGER,
        choices=ledger_names(),
        help="Bundled ledger name",
    )

    jobs = subparsers.add_parser("jobs", help="Rank the bundled job list")
    jobs.add_argument(
        "--priority",
        action="append",
        choices=[priority.value for priority in Priority],
        help="Priority toggle (repeatable, default: the sample profile's)",
    )

    chat = subparsers.add_parser("chat", help="Get the bot's reply to a message")
    chat.add_argument("message", help="User message")
    _add_stress_arguments(chat)

    subparsers.add_parser("check", help="Validate the rule file and exit")

    return parser


def _add_stress_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--text", default=None, help="Journal entry text")
    parser.add_argument(
        "--negative", action="append", default=[], help="Selected negative factor (repeatable)"
    )
    parser.add_argument(
        "--positive", action="append", default=[], help="Selected positive factor (repeatable)"
    )


def run_command(args: argparse.Namespace, app_config: AppConfig) -> Any:
    """Execute a subcommand and return a JSON-ready result."""
    if args.command == "stress":
        scorer = StressScorer(app_config.stress)
        result = scorer.compute_stress(args.text or "", args.negative, args.positive)
        return {
            **result.model_dump(mode="json"),
            "guidance": scorer.guidance_for(result.score),
            "tips": scorer.tips_for(result.score),
        }

    if args.command == "finance":
        advisor = FinanceAdvisor(app_config.finance)
        summary, tips = advisor.advise(load_transactions(args.ledger))
        return {"summary": summary.model_dump(mode="json"), "tips": tips}

    if args.command == "jobs":
        matcher = JobMatcher(app_config.jobs)
        ranked = matcher.rank(load_jobs(), load_profile(), args.priority)
        return [match.model_dump(mode="json") for match in ranked]

    if args.command == "chat":
        last_result: Optional[StressResult] = None
        if args.text is not None or args.negative or args.positive:
            scorer = StressScorer(app_config.stress)
            last_result = scorer.compute_stress(args.text or "", args.negative, args.positive)
        resolver = ChatIntentResolver(app_config.chat)
        return {"reply": resolver.reply(args.message, last_result)}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the StressMate CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "check":
            if args.config is None:
                load_config(None)
                print("✓ Rule tables are valid")
                return 0
            return 0 if validate_config_file(args.config) else 1

        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )

        with log_context(command=args.command):
            logger.info("Running command", extra={"event": "cli.command.started"})
            output = run_command(args, app_config)
            logger.info("Command finished", extra={"event": "cli.command.completed"})

        print(json.dumps(output, ensure_ascii=False, indent=2))
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            "Configuration error",
            extra={"event": "config.error", "error_type": "ConfigurationError"},
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
