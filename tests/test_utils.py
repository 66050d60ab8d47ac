"""Tests for the filename helpers in utils.py."""

import logging
from pathlib import Path

import pytest

import utils
from utils import (
    ColorFormatter,
    IconFile,
    filter_svg_files,
    get_export_path,
    get_svg_stem,
    list_icon_files,
    to_pascal_case,
    write_atomic,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("arrow-left", "ArrowLeft"),
        ("arrow left", "ArrowLeft"),
        ("Already-Pascal", "AlreadyPascal"),
        ("home", "Home"),
        ("chevron--double   down", "ChevronDoubleDown"),
        ("icon_v2.1", "Icon_v2.1"),
    ],
)
def test_to_pascal_case(text: str, expected: str) -> None:
    assert to_pascal_case(text) == expected


def test_export_path_to_sibling_tree() -> None:
    assert get_export_path(Path("/proj/assets/svg/"), Path("/proj/src/icons/")) == "../../assets/svg/"


def test_export_path_same_directory() -> None:
    assert get_export_path(Path("/proj/icons"), Path("/proj/icons")) == "./"


def test_export_path_child_directory_is_explicitly_relative() -> None:
    assert get_export_path(Path("/proj/icons/svg"), Path("/proj/icons")) == "./svg/"


def test_export_path_parent_directory() -> None:
    assert get_export_path(Path("/proj"), Path("/proj/icons")) == "../"


def test_filter_svg_files_keeps_order_and_is_case_sensitive() -> None:
    names = ["b.svg", "readme.md", "A.SVG", "a.svg", "svg", "c.svg.bak"]
    assert filter_svg_files(names) == ["b.svg", "a.svg"]


def test_get_svg_stem() -> None:
    assert get_svg_stem("arrow-left.svg") == "arrow-left"
    assert get_svg_stem("my.svg.svg") == "my.svg"


def test_icon_file_component_name() -> None:
    icon = IconFile("arrow-left.svg")
    assert icon.stem == "arrow-left"
    assert icon.component_name == "IconArrowLeft"


def test_icon_file_rejects_other_suffix() -> None:
    with pytest.raises(ValueError):
        IconFile("arrow-left.png")


def test_list_icon_files(tmp_path: Path) -> None:
    (tmp_path / "home.svg").write_text("<svg/>")
    (tmp_path / "notes.txt").write_text("x")

    assert list_icon_files(tmp_path) == [IconFile("home.svg")]


def test_list_icon_files_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        list_icon_files(tmp_path / "missing")


def test_write_atomic_replaces_file(tmp_path: Path) -> None:
    path = tmp_path / "types.ts"
    path.write_text("old")

    write_atomic(path, "new ✓")

    assert path.read_bytes() == "new ✓".encode("utf-8")
    assert [p.name for p in tmp_path.iterdir()] == ["types.ts"]


def test_write_atomic_unencodable_text_keeps_file(tmp_path: Path) -> None:
    path = tmp_path / "types.ts"
    path.write_text("old")

    with pytest.raises(UnicodeError):
        write_atomic(path, "caf\udce9")

    assert path.read_text() == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["types.ts"]


def test_write_atomic_failed_replace_cleans_up(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "icons.ts"
    path.write_text("old")

    def refuse(src, dst):
        raise PermissionError("busy")

    monkeypatch.setattr(utils.os, "replace", refuse)

    with pytest.raises(PermissionError):
        write_atomic(path, "new")

    assert path.read_text() == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["icons.ts"]


def test_color_formatter_leaves_record_untouched() -> None:
    record = logging.makeLogRecord({"levelname": "ERROR", "levelno": logging.ERROR, "msg": "🚨 boom"})

    line = ColorFormatter("%(levelname)s %(message)s").format(record)

    assert line == "\033[31mERROR\033[0m 🚨 boom"
    assert record.levelname == "ERROR"
