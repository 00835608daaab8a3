from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileTask:
    """Пара путей для конвертации одного файла.

    Fields:
        source: Входной файл внутри корня обхода.
        destination: Зеркальный путь внутри выходного корня.
    """
    source: Path
    destination: Path
