#!/usr/bin/env python3
"""
eGrab - Capture the HTML, CSS and JavaScript behind one element of a live page.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Optional

from egrab.constants import DEFAULT_VIEWPORT
from egrab.report import CaptureReport
from egrab.snapshot import capture_url

MODES = ["html", "css", "js", "all"]


def parse_viewport(raw: Optional[str]) -> Dict[str, int]:
    if not raw or "x" not in raw.lower():
        return DEFAULT_VIEWPORT
    width_str, height_str = raw.lower().split("x", 1)
    try:
        return {"width": int(width_str), "height": int(height_str)}
    except ValueError:
        return DEFAULT_VIEWPORT


def status(message: str) -> None:
    print(message, file=sys.stderr)


def write_report(report: CaptureReport, output: Optional[str]) -> None:
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report.data + "\n", encoding="utf-8")
        status(f"Report: {path}")
    else:
        print(report.data)


def report_limits(limits: List[str]) -> None:
    for note in limits:
        status(f"⚠️  {note}")


async def main_async(args: argparse.Namespace) -> int:
    try:
        report, limits = await capture_url(
            args.url,
            args.selector,
            action=args.mode,
            headed=args.headed,
            wait_ms=args.wait_ms,
            timeout_ms=args.timeout_ms,
            viewport=parse_viewport(args.viewport),
        )
    except Exception as exc:
        status(f"❌ Capture failed: {exc}")
        return 1

    report_limits(limits)
    if not report.success:
        status(f"❌ {report.message}")
        return 1

    write_report(report, args.output)
    status(f"✅ {args.mode.upper()} captured for {args.selector}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Capture the HTML, CSS and JavaScript behind a page element")
    parser.add_argument("url", help="Page URL to open")
    parser.add_argument("--selector", "-s", required=True, help="CSS selector of the element to capture")
    parser.add_argument("--mode", "-m", choices=MODES, default="all", help="What to capture (default: all)")
    parser.add_argument("--output", "-o", help="Write the report to this file instead of stdout")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--wait-ms", type=int, default=1000, help="Extra settle time after load")
    parser.add_argument("--timeout-ms", type=int, default=60000, help="Navigation timeout")
    parser.add_argument("--viewport", help="Viewport size, e.g. 1440x900")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    sys.exit(asyncio.run(main_async(args)))


if __name__ == "__main__":
    main()
