# RotaLog — Severity levels
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from enum import IntEnum
from typing import Union


class Level(IntEnum):
	"""Ordered severity used for filtering: INFO < WARNING < ERROR."""

	INFO = 0
	WARNING = 1
	ERROR = 2

	@property
	def tag(self) -> str:
		return f"[{self.name}]"

	@classmethod
	def parse(cls, value: Union["Level", int, str]) -> "Level":
		"""Accept a member, an integer, a digit string or a name (any case)."""
		if isinstance(value, cls):
			return value
		if isinstance(value, bool):
			raise ValueError(f"not a log level: {value!r}")
		if isinstance(value, int):
			return cls(value)
		if isinstance(value, str):
			text = value.strip()
			if text.isdigit():
				return cls(int(text))
			try:
				return cls[text.upper()]
			except KeyError:
				pass
		raise ValueError(f"not a log level: {value!r}")
