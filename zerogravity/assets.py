"""
Best-effort loading of image and cursor files.

Assets are optional decoration: a missing or unreadable file is logged once
and the caller renders without it.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from .logger import logger

CURSOR_IMAGE = "final.png"
AVATAR_IMAGE = "kid.png"
QUIZ_IMAGE = "solar.png"

# Built-in Tk cursor used when no custom cursor file is present
DEFAULT_CURSOR = "star"


def load_image(path: Union[str, Path], size: Optional[Tuple[int, int]] = None,
               fit: bool = False) -> Optional[Image.Image]:
    """
    Open an image and optionally resize it.

    With `fit=True` the image is scaled down to fit inside `size` keeping its
    aspect ratio (never scaled up); otherwise it is resized to exactly `size`.
    Returns None if the file is missing or cannot be decoded.
    """
    path = Path(path)
    if not path.is_file():
        logger.img(f"Asset not found, skipping: {path}")
        return None
    try:
        with Image.open(path) as opened:
            image = opened.convert("RGBA")
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read image {path}: {e}")
        return None

    if size:
        if fit:
            image.thumbnail(size, Image.Resampling.LANCZOS)
        else:
            image = image.resize(size, Image.Resampling.LANCZOS)
    return image


def resolve_cursor(asset_dir: Union[str, Path]) -> str:
    """
    Return the Tk cursor option for the custom pointer.

    Tk can only load cursor files natively: .cur on Windows, X bitmaps
    elsewhere. Without one we fall back to a built-in cursor.
    """
    asset_dir = Path(asset_dir)
    candidate = asset_dir / ("final.cur" if sys.platform.startswith("win") else "final.xbm")
    if candidate.is_file():
        logger.img(f"Using custom cursor {candidate}")
        if candidate.suffix == ".xbm":
            return f"@{candidate.as_posix()} black"
        return f"@{candidate.as_posix()}"
    logger.img(f"No cursor file in {asset_dir}, using '{DEFAULT_CURSOR}'")
    return DEFAULT_CURSOR
