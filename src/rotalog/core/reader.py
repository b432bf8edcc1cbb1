# RotaLog — Lazy reader over written log files
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
from typing import Iterator, Optional, Union

from rich.console import Console

from .entry import parse_line
from .levels import Level


class LogLines:
	"""Lazy, repeatable view of the lines in a log file.

	`found` reports whether the file exists right now. Every iteration reopens
	the file; if it is missing at that moment the iteration is simply empty.

	Level filtering is a substring match on the bracketed tag (e.g. `[ERROR]`),
	so a message that quotes another level's tag also matches. Pass
	exact=True to match only the level field of well-formed lines.
	"""

	def __init__(self, path: str, level: Optional[Level] = None, exact: bool = False) -> None:
		self.path = path
		self.level = level
		self.exact = exact

	@property
	def found(self) -> bool:
		return os.path.isfile(self.path)

	def __bool__(self) -> bool:
		return self.found

	def __iter__(self) -> Iterator[str]:
		try:
			f = open(self.path, "r", encoding="utf-8")
		except FileNotFoundError:
			return
		with f:
			for raw in f:
				line = raw.rstrip("\r\n")
				if self._matches(line):
					yield line

	def _matches(self, line: str) -> bool:
		if self.level is None:
			return True
		if self.exact:
			entry = parse_line(line)
			return entry is not None and entry.level == self.level
		return self.level.tag in line


def read_logs(path: str, level: Union[Level, int, str, None] = None, exact: bool = False) -> LogLines:
	return LogLines(path, Level.parse(level) if level is not None else None, exact)


class LogReader:
	"""Reader bound to one log file path."""

	def __init__(self, path: str) -> None:
		self.path = path

	def read(self, level: Union[Level, int, str, None] = None, exact: bool = False) -> LogLines:
		return read_logs(self.path, level, exact)

	def print_logs(
		self,
		level: Union[Level, int, str, None] = None,
		console: Optional[Console] = None,
		exact: bool = False,
	) -> bool:
		"""Print matching lines; returns False (after a notice) if the file is missing."""
		console = console or Console(highlight=False, soft_wrap=True)
		lines = self.read(level, exact)
		if not lines.found:
			console.print(f"Log file not found: {self.path}", markup=False, highlight=False)
			return False
		for line in lines:
			console.print(line, markup=False, highlight=False)
		return True
