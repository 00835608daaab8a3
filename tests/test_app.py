from __future__ import annotations

import pytest
from PIL import Image

from bmp2png.app import USAGE, Bmp2PngApp
from bmp2png.main import main
from bmp2png.models.palette import TRANSPARENT


@pytest.fixture
def lines():
    return []


@pytest.fixture
def app(lines):
    return Bmp2PngApp(echo=lines.append)


@pytest.fixture
def tree(make_image, sprite_rows, tmp_path):
    src = tmp_path / "in"
    make_image(src / "a.bmp", sprite_rows)
    make_image(src / "sub" / "b.bmp", sprite_rows)
    (src / "readme.txt").write_text("not an image")
    return src


def test_converts_tree(app, lines, tree, tmp_path):
    out = tmp_path / "out"

    assert app.run([str(tree), str(out)]) == 0

    produced = sorted(p.relative_to(out).as_posix() for p in out.rglob("*") if p.is_file())
    assert produced == ["a.png", "sub/b.png"]
    assert lines == [
        f"Successfully converted {tree / 'a.bmp'} to {out / 'a.png'}",
        f"Successfully converted {tree / 'sub' / 'b.bmp'} to {out / 'sub' / 'b.png'}",
        f"Converted 2 file(s) from {tree} to {out}",
    ]
    with Image.open(out / "sub" / "b.png") as img:
        assert img.getpixel((0, 0)) == TRANSPARENT
        assert img.getpixel((1, 0)) == (200, 10, 10, 255)


def test_explicit_bmp_selector_is_case_insensitive(app, tree, tmp_path):
    assert app.run([str(tree), str(tmp_path / "out"), "bmp"]) == 0
    assert (tmp_path / "out" / "a.png").is_file()


def test_png_source_uses_white_palette(app, lines, make_image, tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    white, blue = (255, 255, 255), (0, 0, 255)
    make_image(src / "icon.png", [[white, blue]], fmt="PNG")

    assert app.run([str(src), str(out), "PNG"]) == 0

    with Image.open(out / "icon.png") as img:
        assert img.getpixel((0, 0)) == TRANSPARENT
        assert img.getpixel((1, 0)) == (0, 0, 255, 255)


def test_invalid_format(app, lines, tree, tmp_path):
    out = tmp_path / "out"

    assert app.run([str(tree), str(out), "GIF"]) == 1

    assert len(lines) == 1
    assert lines[0].startswith("Invalid format")
    assert not out.exists()


@pytest.mark.parametrize("argv", [[], ["only-one"], ["a", "b", "BMP", "extra"]])
def test_wrong_argument_count(app, lines, argv):
    assert app.run(argv) == 1
    assert lines == [USAGE]


def test_missing_input_directory(app, lines, tmp_path):
    out = tmp_path / "out"

    assert app.run([str(tmp_path / "missing"), str(out)]) == 1

    assert lines[0].startswith("Error processing files:")
    assert not out.exists()


def test_corrupted_file_aborts_walk(app, lines, make_image, sprite_rows, tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    make_image(src / "a.bmp", sprite_rows)
    (src / "b.bmp").write_bytes(b"BM" + b"\xff" * 40)
    make_image(src / "c.bmp", sprite_rows)

    assert app.run([str(src), str(out)]) == 1

    assert (out / "a.png").is_file()
    assert not (out / "b.png").exists()
    assert not (out / "c.png").exists()
    assert lines[0] == f"Successfully converted {src / 'a.bmp'} to {out / 'a.png'}"
    assert lines[-1].startswith("Error processing files:")
    assert "b.bmp" in lines[-1]


def test_directory_create_failure_aborts_walk(app, lines, make_image, sprite_rows, tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    make_image(src / "sub" / "a.bmp", sprite_rows)
    out.mkdir()
    (out / "sub").write_text("in the way")

    assert app.run([str(src), str(out)]) == 1
    assert lines[-1].startswith("Error processing files: error creating output directory")


def test_main_prints_to_stdout(capsys, tree, tmp_path):
    assert main([str(tree), str(tmp_path / "out")]) == 0

    stdout = capsys.readouterr().out.splitlines()
    assert len(stdout) == 3
    assert stdout[-1].startswith("Converted 2 file(s)")


def test_directories_starting_with_dash(app, lines, make_image, sprite_rows, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    make_image(tmp_path / "-in" / "a.bmp", sprite_rows)

    assert app.run(["-in", "-out"]) == 0

    assert (tmp_path / "-out" / "a.png").is_file()
    assert lines[-1] == "Converted 1 file(s) from -in to -out"
