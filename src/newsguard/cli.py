"""CLI for the NewsGuard fact-check core."""

import argparse
import asyncio
import base64
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from newsguard.analysis_log import save_analysis_safely
from newsguard.config import create_from_config, get_default_config_path, load_config
from newsguard.data import AnalysisKind
from newsguard.errors import InvalidRequestError
from newsguard.factcheck import TextCheckOptions

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["text", "image", "resources"]
    target: str
    config: Path
    search_query: str | None = None
    max_results: int | None = Field(default=None, ge=1, le=10)
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = Field(default=None, ge=1, le=4000)
    user: str | None = None
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _read_image(path: str) -> str:
    image_path = Path(path)
    if not image_path.is_file():
        raise InvalidRequestError(f"Image file not found: {image_path}")
    return base64.b64encode(image_path.read_bytes()).decode("ascii")


async def run(args: CLIArgs) -> None:
    """Execute one command with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    checker, analysis_logger, scale = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Config: {args.config}")

    if args.command == "resources":
        resources = await checker.find_resources(args.target, limit=args.max_results or 5)
        print(json.dumps([asdict(r) for r in resources], indent=2))
        return

    if args.command == "text":
        options = TextCheckOptions(
            search_query=args.search_query,
            max_results=args.max_results,
            temperature=args.temperature,
            max_tokens=args.max_tokens,
        )
        result = await checker.check_text(args.target, options)
        kind, payload = AnalysisKind.TEXT, args.target
    else:
        image_base64 = _read_image(args.target)
        result = await checker.check_image(image_base64)
        kind, payload = AnalysisKind.IMAGE, image_base64

    print(json.dumps(result.to_dict(), indent=2))
    logger.info(
        f"Verdict: {result.verdict} "
        f"(confidence {result.confidence}, {scale.score(result.confidence):.1f})"
    )

    entry_id = save_analysis_safely(analysis_logger, args.user, kind, payload, result)
    if entry_id and analysis_logger and analysis_logger.last_log_path:
        logger.info(f"Analysis log written to: {analysis_logger.last_log_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fact-check text or images against web search.")
    parser.add_argument(
        "command",
        choices=["text", "image", "resources"],
        help="What to do: check text, check an image file, or list fact-check resources",
    )
    parser.add_argument(
        "target",
        help="Claim text, image path, or resource search query",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument("--search-query", type=str, default=None, help="Override the search query")
    parser.add_argument("--max-results", type=int, default=None, help="Search results (1-10)")
    parser.add_argument(
        "--temperature", type=float, default=None, help="Sampling temperature (0-2)"
    )
    parser.add_argument("--max-tokens", type=int, default=None, help="Max response tokens (1-4000)")
    parser.add_argument("--user", type=str, default=None, help="User id recorded in the log")
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Save the analysis to a JSON log file (requires --user)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main() -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args()

    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO, format="%(message)s")

    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            target=ns.target,
            config=config_path,
            search_query=ns.search_query,
            max_results=ns.max_results,
            temperature=ns.temperature,
            max_tokens=ns.max_tokens,
            user=ns.user,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
