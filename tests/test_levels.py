from datetime import datetime

import pytest
from rotalog.core.entry import LogEntry, parse_line
from rotalog.core.levels import Level


def test_levels_are_ordered():
	assert Level.INFO < Level.WARNING < Level.ERROR
	assert [int(lvl) for lvl in Level] == [0, 1, 2]


def test_parse_accepts_names_numbers_and_members():
	assert Level.parse("warning") == Level.WARNING
	assert Level.parse(" ERROR ") == Level.ERROR
	assert Level.parse(2) == Level.ERROR
	assert Level.parse("0") == Level.INFO
	assert Level.parse(Level.WARNING) is Level.WARNING


@pytest.mark.parametrize("bad", ["DEBUG", "", 3, -1, True, None])
def test_parse_rejects_unknown(bad):
	with pytest.raises(ValueError):
		Level.parse(bad)


def test_entry_format():
	e = LogEntry(datetime(2025, 3, 9, 7, 5, 1), Level.WARNING, 42, "disk almost full")
	assert e.format() == "[2025-03-09 07:05:01] [WARNING] [Thread-42] disk almost full"


def test_parse_line_reads_formatted_entry():
	e = LogEntry(datetime(2025, 3, 9, 7, 5, 1), Level.ERROR, 7, "boom [INFO] inside")
	assert parse_line(e.format()) == e
	assert parse_line("not a log line") is None
	assert parse_line("[2025-03-09 07:05:01] [DEBUG] [Thread-1] x") is None
