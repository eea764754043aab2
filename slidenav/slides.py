"""Slide source - lists and probes slide images in a directory."""

from __future__ import annotations
import os
from typing import List, Optional

from PIL import Image

from .config import SLIDE_EXTS
from .logging import log
from .types import Slide


def is_supported_slide(filepath: str) -> bool:
    """Check if file has a supported slide extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in SLIDE_EXTS


def list_slide_files(dirpath: str) -> List[str]:
    """List all supported slide files in directory, sorted by name.

    Args:
        dirpath: Directory path to scan.

    Returns:
        List of full paths to slide files.
    """
    try:
        names = sorted(os.listdir(dirpath))
    except OSError as e:
        log(f"[SLIDES][ERR] Cannot list {dirpath}: {e!r}")
        return []

    result = []
    for name in names:
        path = os.path.join(dirpath, name)
        if os.path.isfile(path) and is_supported_slide(name):
            result.append(path)
    return result


def probe_slide(path: str) -> Optional[Slide]:
    """Read a slide's dimensions and title with Pillow.

    Returns None if the file is not a readable image.
    """
    try:
        with Image.open(path) as img:
            w, h = img.size
            title = img.info.get("Title") or img.info.get("title")
            img.verify()
    except Exception as e:
        log(f"[SLIDES][ERR] Skipping {os.path.basename(path)}: {e!r}")
        return None

    if w <= 0 or h <= 0:
        return None
    if not title:
        title = os.path.splitext(os.path.basename(path))[0]
    return Slide(path=path, width=w, height=h, title=str(title))


def load_slides(dirpath: str) -> List[Slide]:
    """All readable slides in dirpath, in name order."""
    slides = []
    for path in list_slide_files(dirpath):
        slide = probe_slide(path)
        if slide is not None:
            slides.append(slide)
    log(f"[SLIDES] {len(slides)} slide(s) in {dirpath}")
    return slides
