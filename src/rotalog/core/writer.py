# RotaLog — Process-wide, thread-safe, size-rotated log writer
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Union

from rich.console import Console

from .entry import LogEntry
from .levels import Level
from ..config import DEFAULT_CONFIG_PATH, DEFAULT_MAX_FILE_SIZE, LoggerConfig, load_config
from ..errors import RotationConflictError
from ..storage.rotation import rotate, should_rotate
from ..ui.console import ConsoleMirror
from ..utils.io import append_line


logger = logging.getLogger(__name__)


class LogWriter:
	"""Leveled log sink that serializes every call through one lock.

	Each `log` call runs filter, rotate-if-needed, format, append and echo
	inside the same critical section, so lines land in the file in the order
	callers entered the lock and never interleave.

	Programs can construct a writer and pass it around, or share the
	process-wide instance from `get_instance()`.
	"""

	_instance: Optional["LogWriter"] = None
	_instance_lock = threading.Lock()

	def __init__(
		self,
		config: Optional[LoggerConfig] = None,
		max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE,
		console: Optional[Console] = None,
		echo: bool = True,
		clock: Optional[Callable[[], datetime]] = None,
	) -> None:
		if max_file_size_bytes <= 0:
			raise ValueError("max_file_size_bytes must be positive")
		self.config = config or LoggerConfig()
		self.max_file_size_bytes = max_file_size_bytes
		self.echo = echo
		self._mirror = ConsoleMirror(console)
		self._clock = clock or datetime.now
		self._lock = threading.Lock()
		self._min_level = self.config.min_level

	@classmethod
	def from_config_file(cls, path: str = DEFAULT_CONFIG_PATH, **kwargs) -> "LogWriter":
		return cls(config=load_config(path), **kwargs)

	@classmethod
	def get_instance(cls) -> "LogWriter":
		"""Return the shared writer, building it from logger.json on first use.

		Concurrent first callers block until construction finishes. If loading
		the config fails nothing is stored, so a later call tries again.
		"""
		inst = cls._instance
		if inst is not None:
			return inst
		with cls._instance_lock:
			if cls._instance is None:
				cls._instance = cls.from_config_file(DEFAULT_CONFIG_PATH)
			return cls._instance

	@classmethod
	def reset_instance(cls) -> None:
		"""Forget the shared writer. Intended for tests."""
		with cls._instance_lock:
			cls._instance = None

	@property
	def log_file_path(self) -> str:
		return self.config.log_file_path

	@property
	def min_level(self) -> Level:
		with self._lock:
			return self._min_level

	def set_level(self, level: Union[Level, int, str]) -> None:
		new_level = Level.parse(level)
		with self._lock:
			self._min_level = new_level

	def log(self, message: str, level: Union[Level, int, str] = Level.INFO) -> Optional[str]:
		"""Write one entry; returns the formatted line, or None if filtered out.

		OSError from the append is raised to the caller.
		"""
		level = Level.parse(level)
		with self._lock:
			if level < self._min_level:
				return None
			self._rotate_if_needed()
			entry = LogEntry(
				timestamp=self._clock(),
				level=level,
				thread_id=threading.get_ident(),
				message=str(message),
			)
			line = entry.format()
			append_line(self.log_file_path, line)
			if self.echo:
				self._mirror.echo(line, level)
			return line

	def info(self, message: str) -> Optional[str]:
		return self.log(message, Level.INFO)

	def warning(self, message: str) -> Optional[str]:
		return self.log(message, Level.WARNING)

	def error(self, message: str) -> Optional[str]:
		return self.log(message, Level.ERROR)

	def _rotate_if_needed(self) -> None:
		# Caller holds self._lock. On failure keep appending to the oversized file.
		path = self.log_file_path
		if not should_rotate(path, self.max_file_size_bytes):
			return
		try:
			rotate(path, self._clock())
		except (OSError, RotationConflictError) as exc:
			logger.warning("Rotation of %s failed, continuing on current file: %s", path, exc)
