"""Палитры цветов фона, которые заменяются прозрачностью.

Палитры задаются на этапе сборки и не меняются во время работы: конвертер
получает нужную палитру параметром, глобального изменяемого состояния нет.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

RGBA = Tuple[int, int, int, int]

# Полностью прозрачный пиксель без вклада цвета.
TRANSPARENT: RGBA = (0, 0, 0, 0)


def _check_channel(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Канал должен быть целым числом: {value!r}")
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"Канал вне диапазона 0..255: {value}")
    return value


@dataclass(frozen=True)
class Palette:
    """Упорядоченный неизменяемый набор точных RGBA-цветов.

    Fields:
        colors: Цвета в порядке проверки.
    """
    colors: Tuple[RGBA, ...] = ()

    @classmethod
    def of(cls, colors: Iterable[Iterable[int]]) -> "Palette":
        """Собирает палитру, проверяя, что каждый цвет — четыре канала 0..255."""
        normalized = []
        for color in colors:
            channels = tuple(_check_channel(c) for c in color)
            if len(channels) != 4:
                raise ValueError(f"Ожидается цвет RGBA из 4 каналов: {channels}")
            normalized.append(channels)
        return cls(tuple(normalized))

    def __iter__(self) -> Iterator[RGBA]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __contains__(self, color: object) -> bool:
        return color in self.colors


# Серо-синие тона фона спрайтов в BMP.
BMP_BACKGROUND = Palette.of([
    (0x81, 0x79, 0x7D, 0xFF),
    (0x69, 0x71, 0x89, 0xFF),
    (0x69, 0x89, 0x91, 0xFF),
    (0x6B, 0x8C, 0x94, 0xFF),
    (0x95, 0xA9, 0xD1, 0xFF),
])

PNG_BACKGROUND = Palette.of([(0xFF, 0xFF, 0xFF, 0xFF)])

EMPTY = Palette()
