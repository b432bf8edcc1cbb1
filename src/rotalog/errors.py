# RotaLog — Error types
# Author: Sachin Chhetri
# Year: 2025
# License: MIT


class RotaLogError(Exception):
	"""Base class for errors raised by rotalog itself.

	File-system failures are not wrapped; they surface as OSError.
	"""


class ConfigError(RotaLogError):
	"""Config file exists but cannot be parsed into a LoggerConfig."""

	def __init__(self, path: str, reason: str) -> None:
		super().__init__(f"invalid logger config {path!r}: {reason}")
		self.path = path
		self.reason = reason


class RotationConflictError(RotaLogError):
	"""No free archive name was left for a rotation."""

	def __init__(self, path: str, candidate: str) -> None:
		super().__init__(f"cannot rotate {path!r}: archive {candidate!r} and all numbered variants exist")
		self.path = path
		self.candidate = candidate
