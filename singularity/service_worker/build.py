"""
Service-worker build step.

Generates service-worker.js in the public output directory with Workbox's
generateSW, run through Node:

    build-sw resources/public
"""

import argparse
import json
import os
import subprocess
import sys
from dataclasses import dataclass, field
from string import Template

import structlog

from ..config import Settings, get_settings
from ..infrastructure.logging import Timer, configure_logging
from .js import to_js_literal
from .options import GenerateSWOptions

logger = structlog.get_logger()

GENERATE_SW_SCRIPT = Template(
    """\
const { generateSW } = require('workbox-build');

generateSW($options).then(({ count, size, warnings }) => {
  process.stdout.write('\\n' + JSON.stringify({ count, size, warnings }) + '\\n');
}).catch((err) => {
  console.error(err && err.stack ? err.stack : String(err));
  process.exit(1);
});
"""
)


class BuildError(Exception):
    """Raised when the service-worker generator fails."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


@dataclass
class BuildReport:
    """What generateSW reported for one build."""

    count: int = 0
    size: int = 0
    warnings: list[str] = field(default_factory=list)


def render_script(options: GenerateSWOptions) -> str:
    return GENERATE_SW_SCRIPT.substitute(options=to_js_literal(options.to_workbox()))


def generate_sw(
    options: GenerateSWOptions,
    node_binary: str = "node",
    cwd: str | None = None,
) -> BuildReport:
    """
    Run generateSW with the given options.

    Args:
        options: generateSW options
        node_binary: Node executable
        cwd: Directory whose node_modules provides workbox-build

    Returns:
        BuildReport parsed from the generator's output

    Raises:
        BuildError: If the generator exits non-zero or its report is unreadable
    """
    logger.info("Generating service worker", sw_dest=options.sw_dest)

    with Timer() as timer:
        completed = subprocess.run(
            [node_binary, "-e", render_script(options)],
            capture_output=True,
            text=True,
            cwd=cwd,
        )

    if completed.returncode != 0:
        logger.error(
            "Service worker generation failed",
            returncode=completed.returncode,
            stderr=completed.stderr.strip(),
        )
        raise BuildError(
            f"generateSW exited with status {completed.returncode}",
            stderr=completed.stderr,
        )

    lines = completed.stdout.strip().splitlines()
    try:
        data = json.loads(lines[-1])
    except (IndexError, ValueError) as e:
        raise BuildError(f"Unreadable generateSW report: {e}", stderr=completed.stderr) from e

    report = BuildReport(
        count=data.get("count") or 0,
        size=data.get("size") or 0,
        warnings=[str(w) for w in data.get("warnings") or []],
    )
    logger.info(
        "Service worker generated",
        sw_dest=options.sw_dest,
        precached_files=report.count,
        precached_bytes=report.size,
        warnings=len(report.warnings),
        duration_ms=timer.duration_ms,
    )
    return report


def build_sw(public_out_dir: str, settings: Settings | None = None) -> BuildReport:
    """Generate the service worker for `public_out_dir` and print its warnings."""
    settings = settings or get_settings()
    if settings.workbox_project_dir:
        # Node runs elsewhere; relative paths stay relative to the caller
        public_out_dir = os.path.abspath(public_out_dir)
    report = generate_sw(
        GenerateSWOptions.for_directory(public_out_dir),
        node_binary=settings.node_binary,
        cwd=settings.workbox_project_dir,
    )
    for warning in report.warnings:
        print(warning)
    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate the app's service worker")
    parser.add_argument("public_out_dir", help="Public output directory to precache")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging("build-sw", settings.log_level)

    try:
        build_sw(args.public_out_dir, settings)
    except BuildError as e:
        if e.stderr:
            print(e.stderr, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
