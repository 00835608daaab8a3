from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from bmp2png.controllers.app_controller import AppController
from bmp2png.errors import ArgumentError, ConversionError
from bmp2png.models.formats import SourceFormat

PROG = "bmp2png"
USAGE = f"Usage: {PROG} inputDirectory outputDirectory [BMP|PNG]"


class _ArgumentParser(argparse.ArgumentParser):
    # argparse завершает процесс с кодом 2; нам нужен код 1 и своя строка usage
    def error(self, message: str) -> None:
        raise ArgumentError(message)


class Bmp2PngApp:
    def __init__(self, echo: Callable[[str], None] = print) -> None:
        self._echo = echo
        self._parser = self._build_parser()
        self._controller = AppController(echo=echo)

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _ArgumentParser(
            prog=PROG,
            add_help=False,
            description="Convert BMP/PNG images to PNG, making background palette colors transparent.",
        )
        parser.add_argument("input_dir", help="Input directory, walked recursively")
        parser.add_argument("output_dir", help="Output directory, created if missing")
        parser.add_argument(
            "format",
            nargs="?",
            default=SourceFormat.BMP.value,
            help="Source format: BMP (default) or PNG",
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Разбирает аргументы и запускает конвертацию. Возвращает код выхода."""
        try:
            # Все аргументы позиционные: пути вида "-in" не должны разбираться как опции
            args = self._parser.parse_args(["--", *(sys.argv[1:] if argv is None else argv)])
        except ArgumentError:
            self._echo(USAGE)
            return 1

        try:
            source_format = SourceFormat.from_name(args.format)
        except ArgumentError as exc:
            self._echo(str(exc))
            return 1

        try:
            count = self._controller.run(args.input_dir, args.output_dir, source_format)
        except ConversionError as exc:
            self._echo(f"Error processing files: {exc}")
            return 1

        self._echo(f"Converted {count} file(s) from {args.input_dir} to {args.output_dir}")
        return 0
