"""Обход входного дерева и построение зеркальных выходных путей.

Принципы:
- SRP: только перечисление файлов и создание каталогов, без декодирования.
- Обход ленивый: после первой ошибки конвертации следующие файлы не затрагиваются.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from bmp2png.errors import DirectoryCreateError, FileOpenError
from bmp2png.models.formats import SourceFormat
from bmp2png.models.task_model import FileTask

logger = logging.getLogger(__name__)


class WalkService:
    def iter_tasks(self, input_root: str | Path, output_root: str | Path, source_format: SourceFormat) -> Iterator[FileTask]:
        """Перечисляет подходящие файлы под `input_root` в лексическом порядке имён.

        Файлы и подкаталоги одного уровня идут вперемешку по имени; ссылки на
        каталоги не разворачиваются. Если выходной корень лежит внутри входного,
        в него обход не заходит.

        Raises:
            FileOpenError: если каталог не удаётся прочитать.
        """
        input_root = Path(input_root)
        output_root = Path(output_root)
        skip_dir = self._nested_output(input_root, output_root)

        for path in self._walk(input_root, skip_dir):
            if not source_format.matches(path):
                logger.debug("Skipping %s: not a %s file", path, source_format.value)
                continue
            relative = path.relative_to(input_root)
            yield FileTask(source=path, destination=output_root / source_format.output_name(relative))

    def ensure_parent(self, task: FileTask) -> None:
        """Создаёт все отсутствующие каталоги-предки выходного файла."""
        self.ensure_dir(task.destination.parent)

    def ensure_dir(self, directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateError(f"error creating output directory {directory}: {exc}") from exc

    # ---- Helpers ----
    def _walk(self, directory: Path, skip_dir: Optional[Path]) -> Iterator[Path]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            raise FileOpenError(f"error reading directory {directory}: {exc}") from exc

        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                if skip_dir is not None and path.resolve() == skip_dir:
                    logger.debug("Skipping output directory %s", path)
                    continue
                yield from self._walk(path, skip_dir)
            elif entry.is_dir():
                logger.debug("Skipping %s: link to a directory", path)
            else:
                yield path

    def _nested_output(self, input_root: Path, output_root: Path) -> Optional[Path]:
        """Возвращает выходной корень, если он лежит внутри входного."""
        resolved_in = input_root.resolve()
        resolved_out = output_root.resolve()
        if resolved_out != resolved_in and resolved_in in resolved_out.parents:
            return resolved_out
        return None
