"""Поддерживаемые исходные форматы.

`SourceFormat` выбирает стратегию декодирования и палитру; обход дерева
каталогов от формата не зависит.
"""
from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Tuple

from bmp2png.errors import ArgumentError
from bmp2png.models.palette import BMP_BACKGROUND, PNG_BACKGROUND, Palette

OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"


class SourceFormat(Enum):
    BMP = "BMP"
    PNG = "PNG"

    @classmethod
    def from_name(cls, name: str) -> "SourceFormat":
        """Разбирает селектор формата без учёта регистра.

        Raises:
            ArgumentError: если формат не BMP и не PNG.
        """
        try:
            return cls(name.strip().upper())
        except ValueError as exc:
            expected = " or ".join(member.value for member in cls)
            raise ArgumentError(f"Invalid format: {name} (expected {expected})") from exc

    @property
    def pil_format(self) -> str:
        """Имя декодера Pillow (`Image.open(..., formats=[...])`)."""
        return self.value

    @property
    def extensions(self) -> Tuple[str, ...]:
        return _EXTENSIONS[self]

    @property
    def palette(self) -> Palette:
        return _PALETTES[self]

    def matches(self, path: PurePath) -> bool:
        return path.suffix.lower() in self.extensions

    def output_name(self, relative: PurePath) -> PurePath:
        """Имя выходного файла: расширение меняется на `.png` только для BMP."""
        if self is SourceFormat.BMP:
            return relative.with_suffix(OUTPUT_SUFFIX)
        return relative


_EXTENSIONS = {
    SourceFormat.BMP: (".bmp",),
    SourceFormat.PNG: (".png",),
}

_PALETTES = {
    SourceFormat.BMP: BMP_BACKGROUND,
    SourceFormat.PNG: PNG_BACKGROUND,
}
