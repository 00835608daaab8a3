"""Загрузка изображений с диска и запись PNG.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и базовое извлечение свойств.
- OCP: новый исходный формат добавляется членом `SourceFormat`, без изменений здесь.
- Файловые дескрипторы закрываются на любом пути, включая ошибки.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from bmp2png.errors import DecodeError, EncodeError, FileOpenError
from bmp2png.models.formats import OUTPUT_FORMAT, SourceFormat
from bmp2png.models.image_model import ImageData

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path, source_format: SourceFormat) -> ImageData:
        """Декодирует изображение строго выбранным форматом и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.
            source_format: Формат, которым разрешено декодировать файл.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            FileOpenError: если файл не удаётся открыть на чтение.
            DecodeError: если байты не являются изображением `source_format`.
        """
        path = Path(file_path)
        try:
            fh = path.open("rb")
        except OSError as exc:
            raise FileOpenError(f"error opening input file {path}: {exc}") from exc

        with fh:
            try:
                with Image.open(fh, formats=[source_format.pil_format]) as decoded:
                    # Полное декодирование, пока файл ещё открыт
                    decoded.load()
                    mode = decoded.mode
                    pil_image = decoded.convert("RGBA")
            except UnidentifiedImageError as exc:
                raise DecodeError(f"error decoding {source_format.value} image {path}: not a {source_format.value} file") from exc
            except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
                raise DecodeError(f"error decoding {source_format.value} image {path}: {exc}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("Decoded %s (%s bytes): %dx%d, mode %s", path, size_bytes, width, height, mode)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=mode,
            source_format=source_format,
            size_bytes=size_bytes,
        )

    def save_image(self, image: Image.Image, file_path: str | Path) -> None:
        """Кодирует изображение в PNG и записывает его по указанному пути.

        Raises:
            EncodeError: если файл не создаётся или кодирование не удалось.
        """
        path = Path(file_path)
        try:
            fh = path.open("wb")
        except OSError as exc:
            raise EncodeError(f"error creating output file {path}: {exc}") from exc

        with fh:
            try:
                image.save(fh, format=OUTPUT_FORMAT)
            except (OSError, ValueError) as exc:
                raise EncodeError(f"error encoding PNG image {path}: {exc}") from exc
