# RotaLog — IO helpers (directories, line appends, file size)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
from typing import Optional


def ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(path)
	if parent:
		os.makedirs(parent, exist_ok=True)


def append_line(path: str, line: str) -> None:
	"""Append one line plus terminator, creating the file (and its directory) if needed."""
	ensure_parent_dir(path)
	with open(path, "a", encoding="utf-8", newline="\n") as f:
		f.write(line + "\n")


def file_size(path: str) -> Optional[int]:
	"""Size in bytes, or None when the file does not exist."""
	try:
		return os.path.getsize(path)
	except FileNotFoundError:
		return None
