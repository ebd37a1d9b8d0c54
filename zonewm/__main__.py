"""
zonewm - Entry point.

Run with:  python -m zonewm [displayplacer-report.txt]

Enumerates the displays (from a saved `displayplacer list` report, or via
Win32 on Windows), composes every preset layout, prints the result and
applies it through the dry-run LoggingExecutor.
"""

import logging
import sys
from pathlib import Path

from zonewm.config.presets import PRESETS
from zonewm.config.settings import DEFAULT_CONFIG
from zonewm.core.displays import enumerate_win32_displays, parse_displayplacer
from zonewm.core.errors import LayoutError
from zonewm.core.placement import LoggingExecutor, apply_layout
from zonewm.geometry.topology import build_topology
from zonewm.layout.composer import compose

log = logging.getLogger("zonewm")


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the CLI."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    # Per-rectangle traces are too chatty for a summary run
    logging.getLogger("zonewm.geometry").setLevel(logging.INFO)


def load_displays(argv: list[str]) -> list[dict]:
    """Display records from the report file in argv, or from Win32."""
    if len(argv) > 1:
        report = Path(argv[1]).read_text(encoding="utf-8")
        return parse_displayplacer(report)
    if sys.platform == "win32":
        return enumerate_win32_displays()
    raise SystemExit(
        "usage: python -m zonewm <displayplacer-report.txt>\n"
        "(live enumeration is only available on Windows)"
    )


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    argv = sys.argv if argv is None else argv

    try:
        topology = build_topology(load_displays(argv))
    except OSError as exc:
        log.error("Cannot read display report: %s", exc)
        return 1
    except LayoutError as exc:
        log.error("Cannot build display topology: %s", exc)
        return 1

    print("\n" + topology.dump_state() + "\n")

    failures = 0
    for name, factory in PRESETS.items():
        try:
            result = compose(topology, factory(), DEFAULT_CONFIG)
        except LayoutError as exc:
            log.error("Preset %s failed: %s", name, exc)
            failures += 1
            continue

        print(result.dump_state() + "\n")
        placement = apply_layout(result.layout, LoggingExecutor())
        if not placement.all_ok:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
