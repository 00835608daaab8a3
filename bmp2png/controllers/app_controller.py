"""Контроллер пакетной конвертации: оркестрация обхода и сервисов.

SOLID:
- SRP: класс связывает обход дерева с конвертацией (без логики обработки изображений).
- DIP: сервисы внедряются полями датакласса; тесты подменяют их своими.
Clean Code:
- Первая ошибка прерывает весь обход; уже записанные файлы остаются на диске.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from bmp2png.errors import FileOpenError
from bmp2png.models.formats import SourceFormat
from bmp2png.models.task_model import FileTask
from bmp2png.services.process_service import ProcessService
from bmp2png.services.walk_service import WalkService

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает обход каталогов с конвертацией файлов.

    Ответственности:
    - Проверка входного корня и создание выходного.
    - Конвертация каждого найденного файла через `ProcessService`.
    - Строка прогресса на каждый успешно сконвертированный файл.
    """
    echo: Callable[[str], None] = print

    _walk_service: WalkService = field(default_factory=WalkService)
    _process_service: ProcessService = field(default_factory=ProcessService)

    def run(self, input_dir: str | Path, output_dir: str | Path, source_format: SourceFormat = SourceFormat.BMP) -> int:
        """Конвертирует все подходящие файлы под `input_dir` в `output_dir`.

        Returns:
            Количество сконвертированных файлов.

        Raises:
            ConversionError: первая ошибка обхода или конвертации.
        """
        input_root = Path(input_dir)
        output_root = Path(output_dir)
        if not input_root.is_dir():
            raise FileOpenError(f"input directory not found: {input_root}")

        palette = source_format.palette
        logger.info("Converting %s files from %s to %s (%d palette colors)",
                    source_format.value, input_root, output_root, len(palette))

        self._walk_service.ensure_dir(output_root)

        converted = 0
        for task in self._walk_service.iter_tasks(input_root, output_root, source_format):
            self._convert_one(task, source_format)
            converted += 1
        return converted

    # ---- Helpers ----
    def _convert_one(self, task: FileTask, source_format: SourceFormat) -> None:
        self._walk_service.ensure_parent(task)
        self._process_service.convert(task, source_format)
        self.echo(f"Successfully converted {task.source} to {task.destination}")
