"""Tests for two-pass rendering."""

import io

import pytest

from tabby.models import FileEntry, MultiLine, OneLine, ReadError
from tabby.renderer import format_multi_line, format_one_line, render


def _render(entries):
    out = io.StringIO()
    had_err = render(entries, out)
    return out.getvalue(), had_err


class TestRender:
    """Layout of both passes."""

    def test_one_line_rows_are_right_aligned(self):
        output, had_err = _render([
            FileEntry("a", OneLine("1")),
            FileEntry("long_name", OneLine("2")),
        ])
        assert output == "        a: 1\nlong_name: 2\n"
        assert had_err is False

    def test_width_includes_multi_line_paths(self):
        output, _ = _render([
            FileEntry("a", OneLine("1")),
            FileEntry("much_longer", MultiLine("x\ny\n")),
        ])
        assert output == "          a: 1\n\nmuch_longer:\nx\ny\n"

    def test_passes_are_separated_and_ordered(self):
        output, _ = _render([
            FileEntry("m1", MultiLine("a\nb\n")),
            FileEntry("o1", OneLine("one")),
            FileEntry("m2", MultiLine("c\nd\n")),
            FileEntry("o2", OneLine("two")),
        ])
        assert output == (
            "o1: one\n"
            "o2: two\n"
            "\n"
            "m1:\n"
            "a\nb\n"
            "\n"
            "m2:\n"
            "c\nd\n"
        )

    def test_errors_are_inline_and_reported(self):
        error = ReadError(FileNotFoundError(2, "No such file or directory"))
        output, had_err = _render([
            FileEntry("ok", OneLine("fine")),
            FileEntry("gone", error),
        ])
        assert output == "  ok: fine\ngone: [Error: No such file or directory]\n"
        assert had_err is True

    def test_empty_one_line(self):
        output, _ = _render([FileEntry("empty", OneLine(""))])
        assert output == "empty: \n"

    def test_no_entries(self):
        assert _render([]) == ("", False)

    def test_defaults_to_stdout(self, capsys):
        render([FileEntry("a", OneLine("b"))])
        assert capsys.readouterr().out == "a: b\n"


class TestFormatting:
    """Formatting of individual entries."""

    def test_format_one_line_rejects_multi_line(self):
        with pytest.raises(TypeError):
            format_one_line(FileEntry("m", MultiLine("a\nb\n")), 1)

    def test_format_multi_line_rejects_one_line(self):
        with pytest.raises(TypeError):
            format_multi_line(FileEntry("o", OneLine("x")))

    def test_format_error_message_for_non_os_error(self):
        error = ReadError(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))
        row = format_one_line(FileEntry("bin", error), 3)
        assert row.startswith("bin: [Error: 'utf-8' codec can't decode byte 0xff")
        assert row.endswith("]")
