import pytest
from PIL import Image

from climg import cli
from climg.cli import EXPOSURE_HINT, main, parse_exposure
from climg.model import ConsoleGrid


@pytest.fixture
def small_terminal(monkeypatch):
    monkeypatch.setattr(cli, "get_terminal_size", lambda: ConsoleGrid(2, 2))


def test_missing_image_path_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "usage" in captured.err
    assert captured.out == ""


def test_renders_black_image(image_file, small_terminal, capsys):
    main([str(image_file(2, 2))])
    assert capsys.readouterr().out == "\n    "


def test_renders_white_image_with_exposure(image_file, monkeypatch, capsys):
    monkeypatch.setattr(cli, "get_terminal_size", lambda: ConsoleGrid(1, 1))
    main([str(image_file(1, 1, (255, 255, 255))), "3.0"])
    assert capsys.readouterr().out == "\n█"


@pytest.mark.parametrize("bad", ["-1", "0", "abc", "", "-abc", "-1e3", "-inf", "-x"])
def test_invalid_exposure_falls_back_to_default(bad, image_file, small_terminal, capsys):
    path = str(image_file(4, 4, (128, 128, 128)))
    main([path])
    baseline = capsys.readouterr().out

    main([path, bad])
    out = capsys.readouterr().out
    assert out == EXPOSURE_HINT + "\n" + baseline


def test_extra_arguments_are_rejected(image_file, small_terminal, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(image_file(2, 2)), "2", "-x"])
    assert exc.value.code == 2
    assert "unrecognized arguments" in capsys.readouterr().err


def test_oversized_image_exits_nonzero(image_file, small_terminal, monkeypatch, capsys):
    path = image_file(10, 10)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Failed to load image" in captured.err
    assert captured.out == ""


def test_unreadable_file_exits_nonzero(tmp_path, small_terminal, capsys):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code not in (0, 2)
    captured = capsys.readouterr()
    assert "Failed to load image" in captured.err
    assert captured.out == ""


def test_missing_file_exits_nonzero(tmp_path, small_terminal, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_parse_exposure_default(capsys):
    assert parse_exposure(None) == 3.0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "text, expected",
    [("1.2", 1.2), ("4", 4.0), (" 2.5", 2.5), ("1.5x", 1.5), ("5e-1", 0.5), ("0x2", 2.0), ("0x1.8p1", 3.0), (" 0X.8zz", 0.5)],
)
def test_parse_exposure_accepts_leading_number(text, expected, capsys):
    assert parse_exposure(text) == expected
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("text", ["-1", "0", "x1", "nan", "inf", "1e400", ".", "-0x1", "0x1p99999"])
def test_parse_exposure_rejects(text, capsys):
    assert parse_exposure(text) == 3.0
    assert capsys.readouterr().out == EXPOSURE_HINT + "\n"
