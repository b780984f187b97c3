"""Tests for the editor command and document model."""

import pytest

from list2table.commands import get_command, list_commands
from list2table.editor import (
    COMMAND_ID,
    CURSOR_COLUMN,
    ListToTableCommand,
    TextDocument,
    parse_line_range,
)
from list2table.errors import InvalidLineRangeError
from list2table.types import ConversionConfig, Position, SelectionRange

TABLE = (
    "|       |     |\n"
    "| ----- | --- |\n"
    "| apple |     |\n"
    "| kiwi  |     |\n"
)


def _sel(a_line, a_ch, h_line, h_ch):
    return SelectionRange(
        anchor=Position(line=a_line, ch=a_ch), head=Position(line=h_line, ch=h_ch)
    )


@pytest.fixture
def document():
    return TextDocument("intro\n- apple\n- kiwi\noutro")


class TestTextDocument:
    def test_lines(self, document):
        assert document.line_count == 4
        assert document.get_line(1) == "- apple"

    def test_get_range_single_line(self, document):
        assert document.get_range(Position(line=1, ch=2), Position(line=1, ch=5)) == "app"

    def test_get_range_multi_line(self, document):
        text = document.get_range(Position(line=0, ch=3), Position(line=2, ch=3))
        assert text == "ro\n- apple\n- k"

    def test_replace_range(self, document):
        document.replace_range(Position(line=1, ch=2), Position(line=2, ch=2), "X\nY")
        assert document.text == "intro\n- X\nYkiwi\noutro"

    def test_full_lines_forward(self, document):
        widened = document.full_lines(_sel(1, 3, 2, 1))
        assert widened.start == Position(line=1, ch=0)
        assert widened.end == Position(line=2, ch=6)

    def test_full_lines_backward(self, document):
        widened = document.full_lines(_sel(2, 1, 1, 3))
        assert widened.start == Position(line=1, ch=0)
        assert widened.end == Position(line=2, ch=6)


class TestListToTableCommand:
    def test_converts_selection(self, document):
        cursor = Position(line=2, ch=3)
        new_cursor = ListToTableCommand().run(document, [_sel(1, 3, 2, 3)], cursor)
        assert new_cursor == Position(line=2, ch=CURSOR_COLUMN)
        assert document.text == "intro\n" + TABLE + "\noutro"

    def test_backward_selection(self, document):
        cursor = Position(line=1, ch=3)
        new_cursor = ListToTableCommand().run(document, [_sel(2, 3, 1, 3)], cursor)
        assert new_cursor == Position(line=1, ch=CURSOR_COLUMN)
        assert document.text == "intro\n" + TABLE + "\noutro"

    def test_partial_single_line(self, document):
        ListToTableCommand().run(document, [_sel(1, 2, 1, 4)], Position(line=1, ch=4))
        assert document.get_line(3) == "| apple |     |"
        assert document.get_line(5) == "- kiwi"

    def test_uses_config_provider(self, document):
        config = ConversionConfig(leave_header_empty=False, number_of_empty_columns=0)
        command = ListToTableCommand(lambda: config)
        command.run(document, [_sel(1, 0, 2, 6)], Position(line=1, ch=0))
        assert document.text == "intro\n| apple |\n| ----- |\n| kiwi  |\n\noutro"

    def test_config_read_per_run(self, document):
        configs = iter([ConversionConfig(number_of_empty_columns=0)])
        command = ListToTableCommand(lambda: next(configs))
        command.run(document, [_sel(1, 0, 2, 6)], Position(line=1, ch=0))
        assert document.get_line(1) == "|       |"

    def test_form_feed_stays_in_one_row(self):
        document = TextDocument("- a\x0cb\n- c")
        ListToTableCommand().run(document, [_sel(0, 0, 1, 3)], Position(line=0))
        assert document.text.split("\n")[2:4] == ["| a\x0cb |     |", "| c   |     |"]

    def test_no_selection(self, document):
        assert ListToTableCommand().run(document, [], Position(line=0)) is None
        assert document.text == "intro\n- apple\n- kiwi\noutro"

    def test_empty_selection(self, document):
        result = ListToTableCommand().run(document, [_sel(1, 2, 1, 2)], Position(line=1, ch=2))
        assert result is None
        assert document.text == "intro\n- apple\n- kiwi\noutro"

    def test_multiple_selections(self, document):
        selections = [_sel(1, 0, 1, 7), _sel(2, 0, 2, 6)]
        assert ListToTableCommand().run(document, selections, Position(line=1)) is None
        assert document.text == "intro\n- apple\n- kiwi\noutro"

    def test_whitespace_only_selection(self):
        document = TextDocument("a\n   \n\nb")
        assert ListToTableCommand().run(document, [_sel(1, 0, 2, 0)], Position(line=1)) is None
        assert document.text == "a\n   \n\nb"

    def test_markers_without_items(self):
        document = TextDocument("- \n- ")
        assert ListToTableCommand().run(document, [_sel(0, 0, 1, 2)], Position(line=0)) is None
        assert document.text == "- \n- "


class TestParseLineRange:
    def test_range(self, document):
        selection = parse_line_range("2:3", document)
        assert selection.anchor == Position(line=1, ch=0)
        assert selection.head == Position(line=2, ch=6)

    def test_single_line(self, document):
        selection = parse_line_range("2", document)
        assert selection.start.line == selection.end.line == 1

    def test_open_bounds(self, document):
        selection = parse_line_range(":", document)
        assert selection.start == Position(line=0, ch=0)
        assert selection.end == Position(line=3, ch=5)

    @pytest.mark.parametrize("raw", ["abc", "1:x", "0:2", "3:2", "2:9"])
    def test_invalid(self, document, raw):
        with pytest.raises(InvalidLineRangeError) as exc_info:
            parse_line_range(raw, document)
        assert exc_info.value.raw == raw


class TestCommandRegistry:
    def test_registered(self):
        info = get_command(COMMAND_ID)
        assert info is not None
        assert info.name == "Convert list to table"
        assert info.factory is ListToTableCommand

    def test_listed(self):
        assert COMMAND_ID in [info.id for info in list_commands()]

    def test_unknown(self):
        assert get_command("nope") is None
