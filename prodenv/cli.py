"""Command line entry point: ``prod-env init``."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence

from pydantic import ValidationError

from prodenv.config import Settings, get_settings
from prodenv.errors import ConfigError, EnvInitError, UsageError
from prodenv.services import (
    build_replacements,
    read_template,
    render,
    validate_preconditions,
    write_output,
)
from prodenv.services.template import LLM_KEY_NAME


logger = logging.getLogger("prodenv.cli")

USAGE = """\
Usage:
  prod-env init [--force] [--out <file>] [--llm-key <key>]

Creates/updates a runtime env file (default: .prod.secrets.env) based on .prod.env,
generating secure secrets for variables set to CHANGE_ME.

Options:
  --out <file>      Output env file path (default: .prod.secrets.env)
  --llm-key <key>   Set LLM_BINDING_API_KEY to this value
  --force           Overwrite output file if it exists

Run with docker-compose:
  docker compose --env-file .prod.secrets.env -f docker-compose.prod.yaml up -d
"""

COMMANDS = ("init",)


@dataclass
class InitOptions:
    """Parsed command line."""

    command: Optional[str]
    out_path: Path
    llm_key: str = ""
    force: bool = False
    show_help: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="prod-env", add_help=False, allow_abbrev=False)
    parser.add_argument("command", nargs="?")
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("--force", action="store_true")
    parser.add_argument("--out")
    parser.add_argument("--llm-key", dest="llm_key", default="")
    return parser


VALUE_FLAGS = ("--out", "--llm-key")


def _join_flag_values(argv: Sequence[str]) -> list[str]:
    """Attach the next item to flags taking a value so values may start with ``-``."""
    joined: list[str] = []
    items = iter(argv)
    for item in items:
        if item in VALUE_FLAGS:
            value = next(items, None)
            joined.append(item if value is None else f"{item}={value}")
        else:
            joined.append(item)
    return joined


def parse_args(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> InitOptions:
    """Parse ``argv`` into options; flags are checked before the command."""
    settings = settings or get_settings()
    if argv is None:
        argv = sys.argv[1:]
    args, extras = _build_parser().parse_known_args(_join_flag_values(argv))
    if extras:
        raise UsageError(f"Unknown argument: {extras[0]}")

    options = InitOptions(
        command=args.command,
        out_path=settings.resolve_output(args.out),
        llm_key=args.llm_key,
        force=args.force,
        show_help=args.show_help,
    )
    if options.show_help:
        return options
    if options.command not in COMMANDS:
        raise UsageError(exit_code=2, show_usage=True)
    return options


def report_summary(replacements: Dict[str, str], out_path: Path) -> None:
    """Print what was written without echoing generated secrets."""
    print(f"Wrote: {out_path}")
    if not replacements:
        print(f"No {get_settings().PLACEHOLDER} placeholders found; nothing generated.")
        return

    print("Updated keys:")
    for key in sorted(replacements):
        if key == LLM_KEY_NAME:
            value = replacements[key]
            suffix = value[-4:] if len(value) >= 4 else "****"
            print(f"- {key}=(provided)***{suffix}")
        else:
            print(f"- {key}=(generated)")


def run_init(options: InitOptions, settings: Settings) -> Dict[str, str]:
    """Materialize the runtime env file and return the applied replacements."""
    template_path = settings.template_path
    validate_preconditions(template_path, options.out_path, options.force)

    template = read_template(template_path)
    replacements = build_replacements(template, options.llm_key)
    write_output(options.out_path, render(template, replacements))
    logger.info("Initialized %s from %s (%d keys)", options.out_path, template_path, len(replacements))

    report_summary(replacements, options.out_path)
    print(f"NOTE: Keep {options.out_path} secret (do not commit).", file=sys.stderr)
    return replacements


def load_settings() -> Settings:
    """Return validated settings, reporting bad ``PRODENV_*`` values as a ConfigError."""
    try:
        return get_settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"PRODENV_{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings()
        logging.basicConfig(level=settings.LOG_LEVEL)
        options = parse_args(argv, settings)
        if options.show_help:
            print(USAGE, end="")
            return 0
        run_init(options, settings)
    except UsageError as exc:
        if exc.show_usage:
            print(USAGE, end="")
        else:
            print(f"ERROR: {exc}", file=sys.stderr)
        return exc.exit_code
    except EnvInitError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return exc.exit_code
    except OSError as exc:
        logger.debug("I/O failure", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
