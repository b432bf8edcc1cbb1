# RotaLog — Log entries and the on-disk line format
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .levels import Level


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LINE_PATTERN = re.compile(
	r"^\[(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] "
	r"\[(?P<level>[A-Z]+)\] "
	r"\[Thread-(?P<thread_id>\d+)\] "
	r"(?P<message>.*)$"
)


@dataclass(frozen=True)
class LogEntry:
	timestamp: datetime
	level: Level
	thread_id: int
	message: str

	def format(self) -> str:
		"""Render as `[YYYY-MM-DD HH:MM:SS] [LEVEL] [Thread-<id>] <message>`."""
		stamp = self.timestamp.strftime(TIMESTAMP_FORMAT)
		return f"[{stamp}] {self.level.tag} [Thread-{self.thread_id}] {self.message}"


def parse_line(line: str) -> Optional[LogEntry]:
	"""Parse one formatted line back into an entry; None if it does not fit the format."""
	m = LINE_PATTERN.match(line.rstrip("\r\n"))
	if not m:
		return None
	try:
		level = Level[m.group("level")]
		ts = datetime.strptime(m.group("timestamp"), TIMESTAMP_FORMAT)
	except (KeyError, ValueError):
		return None
	return LogEntry(
		timestamp=ts,
		level=level,
		thread_id=int(m.group("thread_id")),
		message=m.group("message"),
	)
