"""Slideview - present a directory of slide images."""
from __future__ import annotations
import os
import sys
import atexit
import traceback

from slidenav.app import Application, show_no_slides
from slidenav.deck import parse_slide_number
from slidenav.logging import log, get_frame
from slidenav.slides import load_slides


def main():
    log("[MAIN] Starting application")

    dirpath = None
    start = 1
    for a in sys.argv[1:]:
        p = os.path.abspath(a)
        log(f"[ARGS] Checking argument: {a} -> {p}")
        if dirpath is None and os.path.isdir(p):
            dirpath = p
            log(f"[ARGS] Found slide directory: {dirpath}")
        elif dirpath is None and os.path.isfile(p):
            dirpath = os.path.dirname(p)
            log(f"[ARGS] Found slide file, using its directory: {dirpath}")

    if not dirpath:
        log("[ARGS] No valid path provided, using current directory")
        dirpath = os.getcwd()

    slides = load_slides(dirpath)
    if not slides:
        log("[DIR] No slides found, showing error screen")
        show_no_slides("No slides found")
        return

    # Optional trailing slide number: `slideview.py deck/ 5`
    if len(sys.argv) > 2:
        n = parse_slide_number(sys.argv[-1], len(slides))
        if n is not None:
            start = n

    log(f"[DIR] {dirpath} slides={len(slides)} start={start}")
    atexit.register(lambda: log(f"[EXIT] frames={get_frame()}"))

    app = Application(slides, start=start)
    if not app.initialize():
        return
    app.run()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        log(f"[FATAL] Fatal error: {e!r}")
        log(f"[FATAL] Traceback:\n{traceback.format_exc()}")
        sys.exit(1)
