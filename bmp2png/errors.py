"""Ошибки конвертации.

Каждая ошибка несёт человекочитаемое сообщение с путём к файлу; исходное
исключение Pillow/OS сохраняется через `raise ... from exc`.
"""
from __future__ import annotations


class ConversionError(Exception):
    """Базовая ошибка пакетной конвертации."""


class ArgumentError(ConversionError):
    """Неверное число аргументов или неизвестный формат."""


class FileOpenError(ConversionError):
    """Входной файл или каталог не удаётся открыть."""


class DecodeError(ConversionError):
    """Файл не является изображением ожидаемого формата."""


class DirectoryCreateError(ConversionError):
    """Не удалось создать каталог для выходного файла."""


class EncodeError(ConversionError):
    """Не удалось создать выходной файл или закодировать PNG."""
