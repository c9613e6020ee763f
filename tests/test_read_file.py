# tests/test_read_file.py

import os
import pytest

import agentfs.tools.read_file as reader
from agentfs.tools.read_file import (
    BINARY_EXTENSIONS,
    ReadFileError,
    is_binary_file,
    read_file,
)


def numbered(n: int) -> str:
    return "\n".join(f"line {i}" for i in range(1, n + 1))


def window_lines(result):
    """Formatted lines of the window, without any pagination footer."""
    return result.content.split("\n\n--- End of current view ---")[0].split("\n")


def test_small_file_returns_everything(tmp_path):
    f = tmp_path / "ten.txt"
    f.write_text(numbered(10))

    result = read_file(str(f))

    assert result.is_error is None
    assert result.filepath == str(f)
    assert result.content.split("\n") == [f"{i:02d}| line {i}" for i in range(1, 11)]
    assert "End of current view" not in result.content
    assert result.metadata.total_lines == 10
    assert result.metadata.start_line == 1
    assert result.metadata.end_line == 10


def test_pagination_footer(tmp_path):
    f = tmp_path / "twenty.txt"
    f.write_text(numbered(20))

    result = read_file(str(f), offset=0, limit=5)

    assert window_lines(result) == [f"{i:02d}| line {i}" for i in range(1, 6)]
    assert result.content.endswith(
        "\n\n--- End of current view ---\n"
        "This file has 15 more lines (total: 20 lines).\n"
        "Use offset: 5 to continue reading from line 6."
    )
    assert result.metadata.start_line == 1
    assert result.metadata.end_line == 5


def test_window_in_the_middle(tmp_path):
    f = tmp_path / "twenty.txt"
    f.write_text(numbered(20))

    result = read_file(str(f), offset=7, limit=3)

    assert window_lines(result) == ["08| line 8", "09| line 9", "10| line 10"]
    assert "Use offset: 10 to continue reading from line 11." in result.content
    assert result.metadata.start_line == 8
    assert result.metadata.end_line == 10


@pytest.mark.parametrize("n,offset,limit", [
    (1, 0, 1), (5, 0, 2000), (5, 4, 1), (30, 3, 7), (30, 25, 10), (150, 0, 99), (150, 149, 5),
])
def test_window_size(tmp_path, n, offset, limit):
    f = tmp_path / "f.txt"
    f.write_text(numbered(n))

    result = read_file(str(f), offset=offset, limit=limit)

    assert len(window_lines(result)) == min(limit, n - offset)


def test_padding_grows_with_file_length(tmp_path):
    f = tmp_path / "long.txt"
    f.write_text(numbered(1200))

    result = read_file(str(f), offset=998, limit=3)

    assert window_lines(result) == ["0999| line 999", "1000| line 1000", "1001| line 1001"]


def test_trailing_newline_counts_as_a_line(tmp_path):
    f = tmp_path / "trailing.txt"
    f.write_text("a\nb\n")

    result = read_file(str(f))

    assert result.content == "01| a\n02| b\n03| "
    assert result.metadata.total_lines == 3


def test_empty_file(tmp_path):
    f = tmp_path / "empty.txt"
    f.write_text("")

    result = read_file(str(f))

    assert result.content == "01| "
    assert result.metadata.total_lines == 1
    assert result.metadata.preview == "01| "


def test_offset_past_end_gives_empty_window(tmp_path):
    f = tmp_path / "three.txt"
    f.write_text("a\nb\nc")

    result = read_file(str(f), offset=10, limit=5)

    assert result.is_error is None
    assert result.content == ""
    assert result.metadata.total_lines == 3
    assert result.metadata.start_line == 11
    assert result.metadata.end_line == 3


def test_negative_offset_is_clamped(tmp_path):
    f = tmp_path / "three.txt"
    f.write_text("a\nb\nc")

    result = read_file(str(f), offset=-4, limit=2)

    assert window_lines(result) == ["01| a", "02| b"]
    assert result.metadata.start_line == 1


def test_crlf_is_preserved(tmp_path):
    f = tmp_path / "dos.txt"
    f.write_bytes(b"one\r\ntwo")

    result = read_file(str(f))

    assert result.content == "01| one\r\n02| two"


def test_relative_path_resolves_against_cwd(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "rel.txt").write_text("hi")

    result = read_file("sub/../sub/rel.txt")

    assert result.filepath == os.path.join(os.getcwd(), "sub", "rel.txt")
    assert result.content == "01| hi"


# --- preview ---------------------------------------------------------------

def test_preview_ignores_requested_window(tmp_path):
    f = tmp_path / "forty.txt"
    f.write_text(numbered(40))

    result = read_file(str(f), offset=30, limit=5)
    preview = result.metadata.preview.split("\n")

    assert preview[:15] == [f"{i:02d}| line {i}" for i in range(1, 16)]
    assert preview[15] == "... (25 more lines)"
    assert len(preview) == 16


def test_preview_without_suffix_for_short_files(tmp_path):
    f = tmp_path / "fifteen.txt"
    f.write_text(numbered(15))

    result = read_file(str(f), offset=14, limit=1)

    assert result.metadata.preview == "\n".join(f"{i:02d}| line {i}" for i in range(1, 16))
    assert "more lines" not in result.metadata.preview


def test_preview_keeps_two_digit_padding_on_huge_files(tmp_path):
    f = tmp_path / "huge.txt"
    f.write_text(numbered(12000))

    result = read_file(str(f), offset=0, limit=1)

    assert result.content.startswith("00001| line 1")
    assert result.metadata.preview.startswith("01| line 1\n02| line 2")
    assert result.metadata.preview.endswith("... (11985 more lines)")


# --- not found -------------------------------------------------------------

def test_missing_file_lists_siblings(tmp_path):
    for name in ["b.txt", "a.txt", "c.txt"]:
        (tmp_path / name).write_text("x")
    missing = tmp_path / "nope.txt"

    result = read_file(str(missing))

    assert result.is_error is True
    assert result.metadata is None
    assert result.filepath == str(missing)
    assert result.content == (
        f"File not found: '{missing}'\n\n"
        f"Files in parent directory ({tmp_path}):\n"
        "  - a.txt\n  - b.txt\n  - c.txt"
    )


def test_missing_file_lists_at_most_ten_siblings(tmp_path):
    for i in range(15):
        (tmp_path / f"f{i:02d}.txt").write_text("x")

    result = read_file(str(tmp_path / "missing.txt"))

    listed = [line for line in result.content.split("\n") if line.startswith("  - ")]
    assert listed == [f"  - f{i:02d}.txt" for i in range(10)]


def test_missing_file_in_empty_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = read_file(str(empty / "x.txt"))

    assert result.is_error is True
    assert result.content.endswith(f"Parent directory ({empty}) is empty or inaccessible.")


def test_missing_parent_directory(tmp_path):
    target = tmp_path / "no" / "such" / "dir.txt"

    result = read_file(str(target))

    assert result.is_error is True
    assert f"Parent directory ({tmp_path / 'no' / 'such'}) is empty or inaccessible." in result.content


# --- binary gate -----------------------------------------------------------

def test_binary_file_is_rejected_without_reading(tmp_path, monkeypatch):
    img = tmp_path / "logo.PNG"
    img.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")

    def fail_load(path):
        raise AssertionError("binary files must not be opened")

    monkeypatch.setattr(reader, "_load_lines", fail_load)
    result = read_file(str(img))

    assert result.is_error is True
    assert result.content == (
        f"Cannot read binary file: '{img}'\n\n"
        "This appears to be a binary file (.PNG). Binary files are not supported by this tool."
    )


def test_missing_binary_file_reports_not_found(tmp_path):
    result = read_file(str(tmp_path / "ghost.png"))

    assert result.is_error is True
    assert result.content.startswith("File not found:")


@pytest.mark.parametrize("name,expected", [
    ("photo.jpeg", True),
    ("archive.tar.gz", True),
    ("data.SQLITE3", True),
    ("notes.txt", False),
    ("script.py", False),
    (".bashrc", False),
    ("Makefile", False),
])
def test_is_binary_file(name, expected):
    assert is_binary_file(name) is expected


def test_binary_extensions_are_lowercase():
    assert all(ext == ext.lower() and ext.startswith(".") for ext in BINARY_EXTENSIONS)


# --- unexpected failures ---------------------------------------------------

def test_directory_raises_read_error(tmp_path):
    d = tmp_path / "adir"
    d.mkdir()

    with pytest.raises(ReadFileError) as exc:
        read_file(str(d))

    assert str(exc.value).startswith(f"Failed to read file '{d}': ")
    assert isinstance(exc.value.__cause__, OSError)


def test_invalid_utf8_raises_read_error(tmp_path):
    f = tmp_path / "latin1.txt"
    f.write_bytes(b"caf\xe9")

    with pytest.raises(ReadFileError) as exc:
        read_file("latin1.txt")

    assert "Failed to read file 'latin1.txt'" in str(exc.value)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
