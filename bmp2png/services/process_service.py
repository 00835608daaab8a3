from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from bmp2png.models.formats import SourceFormat
from bmp2png.models.palette import TRANSPARENT, Palette
from bmp2png.models.task_model import FileTask
from bmp2png.services.image_service import ImageService

logger = logging.getLogger(__name__)


class ProcessService:
    def __init__(self, image_service: ImageService | None = None) -> None:
        self._image_service = image_service or ImageService()

    # ---------- Вспомогательные функции ----------
    def _image_to_rgba_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает numpy-массив uint8 формы (H, W, 4).
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return np.asarray(image, dtype=np.uint8)

    def _palette_mask(self, arr: np.ndarray, palette: Palette) -> np.ndarray:
        """
        Булева маска (H, W): True там, где пиксель совпадает с любым цветом палитры
        по всем четырём каналам.
        """
        mask = np.zeros(arr.shape[:2], dtype=bool)
        for color in palette:
            mask |= np.all(arr == np.asarray(color, dtype=np.uint8), axis=-1)
        return mask

    # ---------- Хромакей ----------
    def apply_chroma_key(self, image: Image.Image, palette: Palette) -> Image.Image:
        """
        Заменяет пиксели, точно совпадающие с цветом палитры, на (0, 0, 0, 0).
        Остальные пиксели копируются без изменений.
        Возвращает новое RGBA-изображение того же размера; исходное не мутируется.
        """
        arr = self._image_to_rgba_np(image)
        out = arr.copy()
        mask = self._palette_mask(arr, palette)
        out[mask] = TRANSPARENT
        logger.debug("Chroma key: %d of %d pixels made transparent", int(mask.sum()), mask.size)
        return Image.fromarray(out)

    def convert(self, task: FileTask, source_format: SourceFormat, palette: Palette | None = None) -> None:
        """
        Декодирует `task.source`, применяет хромакей и пишет PNG в `task.destination`.
        Без явной палитры используется палитра формата.
        """
        if palette is None:
            palette = source_format.palette
        image_data = self._image_service.load_image(task.source, source_format)
        processed = self.apply_chroma_key(image_data.pil_image, palette)
        self._image_service.save_image(processed, task.destination)
