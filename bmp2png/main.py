"""Точка входа в приложение."""
import logging
import sys
from typing import List, Optional

from bmp2png.app import Bmp2PngApp


def main(argv: Optional[List[str]] = None) -> int:
    """Создаёт приложение, запускает конвертацию и возвращает код выхода."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    app = Bmp2PngApp()
    return app.run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
