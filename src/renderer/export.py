# renderer/export.py
import logging
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image

from renderer.pixels import unpack_rgb

logger = logging.getLogger(__name__)


def save_image(buffer: np.ndarray, width: int, height: int,
               path: Union[str, Path]) -> Path:
    """
    Saves a packed frame to disk. The format follows the file extension
    (.png, .ppm, .bmp, ...); .ppm files are written as plain-text P3.

    Raises:
        ValueError: If Pillow does not recognise the extension.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with open(path, "w", encoding="ascii") as stream:
            write_ppm(stream, buffer, width, height)
    else:
        image = Image.fromarray(unpack_rgb(buffer, width, height))
        image.save(path)
    logger.info("Saved %dx%d frame to %s", width, height, path)
    return path


def write_ppm(stream: TextIO, buffer: np.ndarray, width: int, height: int):
    """
    Writes a packed frame as a plain-text PPM (P3): one "r g b" line per
    pixel, rows in buffer order.
    """
    rgb = unpack_rgb(buffer, width, height)
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in rgb:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")
