"""Reading and writing binary PGM (P5) images of the world."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

_MAGIC = b"P5"
_MAX_VALUE = 255
_HEADER = re.compile(rb"\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s")


class PgmError(ValueError):
    """Raised when a PGM file is malformed or does not match the expected size."""


def _to_int(token: bytes) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def read_pgm(path: str | Path, width: int, height: int) -> list[bytearray]:
    """Read a P5 image of the given size and return its rows."""
    path = Path(path)
    data = path.read_bytes()

    header = _HEADER.match(data)
    if header is None or header.group(1) != _MAGIC:
        raise PgmError(f"{path.stem} is not a pgm file")
    magic, raw_width, raw_height, raw_max = header.groups()
    if _to_int(raw_width) != width:
        raise PgmError("Incorrect pgm width")
    if _to_int(raw_height) != height:
        raise PgmError("Incorrect pgm height")
    if _to_int(raw_max) != _MAX_VALUE:
        raise PgmError("Incorrect pgm maxval/bit depth")

    pixels = data[header.end():header.end() + width * height]
    if len(pixels) != width * height:
        raise PgmError("Truncated pgm pixel data")
    return [bytearray(pixels[y * width:(y + 1) * width]) for y in range(height)]


def write_pgm(
    path: str | Path, width: int, height: int, world: Sequence[Sequence[int]]
) -> None:
    """Write the world as a P5 image, creating the parent directory if needed."""
    pixels = b"".join(bytes(row) for row in world)
    if len(world) != height or len(pixels) != width * height:
        raise ValueError(f"world does not have size {width}x{height}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as file:
        file.write(f"P5\n{width} {height}\n{_MAX_VALUE}\n".encode("ascii"))
        file.write(pixels)


class ImageIO:
    """Loads named input images and saves named output images of one size."""

    def __init__(
        self,
        width: int,
        height: int,
        images_dir: str | Path = "images",
        out_dir: str | Path = "out",
    ) -> None:
        self.width = width
        self.height = height
        self.images_dir = Path(images_dir)
        self.out_dir = Path(out_dir)

    def read(self, name: str) -> list[bytearray]:
        """Read images_dir/<name>.pgm."""
        world = read_pgm(self.images_dir / f"{name}.pgm", self.width, self.height)
        logger.info("[IO] File %s.pgm input done", name)
        return world

    def write(self, name: str, world: Sequence[Sequence[int]]) -> Path:
        """Write out_dir/<name>.pgm and return its path."""
        path = self.out_dir / f"{name}.pgm"
        write_pgm(path, self.width, self.height, world)
        logger.info("[IO] File %s.pgm output done", name)
        return path