"""Command-line entrypoint: provision the current directory as a Python project.

    project-init                 # provision the working directory
    project-init --dry-run       # show what would happen, change nothing
    python -m project_init --project-dir ../other --report .tmp/init.json
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from project_init.config import load_settings
from project_init.core.bootstrapper import Bootstrapper
from project_init.core.console import Console
from project_init.errors import FatalProvisionError
from project_init.logger import setup_logging
from project_init.schemas import ProvisionReport

EXIT_OK = 0
EXIT_FATAL = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="project-init",
        description="Set up a virtual environment, editor settings and pre-commit hooks.",
    )
    parser.add_argument(
        "--project-dir", default=None, help="Directory to provision (default: current directory)"
    )
    parser.add_argument("--python", default=None, help="Python version for the virtual environment")
    parser.add_argument(
        "--dry-run", action="store_true", help="Report planned actions without changing anything"
    )
    parser.add_argument("--report", default=None, help="Write a JSON run report to this path")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def write_report(report: ProvisionReport, path: str | Path) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return output


def main(argv: list[str] | None = None, console: Console | None = None, runner=None) -> int:  # noqa: ANN001
    args = build_parser().parse_args(argv)
    console = console or Console(color=False if args.no_color else None)

    project_dir = Path(args.project_dir) if args.project_dir else Path.cwd()
    try:
        settings = load_settings(project_dir, python_version=args.python)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        console.error(f"Invalid configuration for {field}: {first['msg']}")
        return EXIT_FATAL

    # Re-read the level now that the project .env has been loaded.
    setup_logging(logging.DEBUG if args.verbose else None)

    bootstrapper = Bootstrapper(
        project_dir=project_dir,
        settings=settings,
        runner=runner,
        console=console,
        dry_run=args.dry_run,
    )
    exit_code = EXIT_OK
    try:
        bootstrapper.run()
    except FatalProvisionError as exc:
        console.error(str(exc))
        exit_code = EXIT_FATAL

    if args.report and bootstrapper.report is not None:
        try:
            written = write_report(bootstrapper.report, args.report)
        except OSError as exc:
            console.error(f"Could not write run report to {args.report}: {exc}")
            return EXIT_FATAL
        console.info(f"Wrote run report to {written}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
