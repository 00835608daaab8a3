from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

import pytest
from PIL import Image

from bmp2png.models.palette import BMP_BACKGROUND

RGB = Tuple[int, int, int]

# Цвета, которых нет ни в одной палитре
RED: RGB = (200, 10, 10)
GREEN: RGB = (10, 200, 10)


def write_image(path: Path, pixels: Iterable[Iterable[RGB]], fmt: str = "BMP", mode: str = "RGB") -> Path:
    """Пишет изображение построчно из списка цветов."""
    rows = [list(row) for row in pixels]
    height, width = len(rows), len(rows[0])
    img = Image.new(mode, (width, height))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            img.putpixel((x, y), color)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path, fmt)
    return path


@pytest.fixture
def background_rgb() -> RGB:
    return BMP_BACKGROUND.colors[0][:3]


@pytest.fixture
def sprite_rows(background_rgb):
    """3x2 спрайт: фон по краям, цветные пиксели в центре."""
    last_bg = BMP_BACKGROUND.colors[-1][:3]
    return [
        [background_rgb, RED, last_bg],
        [GREEN, background_rgb, RED],
    ]


@pytest.fixture
def make_image():
    return write_image
