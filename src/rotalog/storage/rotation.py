# RotaLog — Size-triggered rotation of the active log file
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from datetime import datetime
from typing import Optional

from ..errors import RotationConflictError
from ..utils.io import file_size


logger = logging.getLogger(__name__)

ARCHIVE_STAMP_FORMAT = "%Y%m%d_%H%M%S"
MAX_COLLISION_SUFFIX = 999


def should_rotate(path: str, max_bytes: int) -> bool:
	"""True iff the file exists and has reached max_bytes."""
	size = file_size(path)
	return size is not None and size >= max_bytes


def archive_path_for(path: str, when: datetime, suffix: int = 0) -> str:
	"""Build `<base>_<YYYYMMDD_HHMMSS>[_<n>]<ext>` from the active path.

	Only the final extension is split off, so directory names or earlier
	parts of the file name are left alone.
	"""
	base, ext = os.path.splitext(path)
	stamp = when.strftime(ARCHIVE_STAMP_FORMAT)
	if suffix:
		return f"{base}_{stamp}_{suffix}{ext}"
	return f"{base}_{stamp}{ext}"


def rotate(path: str, now: Optional[datetime] = None) -> str:
	"""Rename the active file to its archive name and return that name.

	If two rotations land on the same second the archive gets a numbered
	suffix (_1, _2, ...). An existing archive is never overwritten.
	"""
	when = now or datetime.now()
	for n in range(MAX_COLLISION_SUFFIX + 1):
		candidate = archive_path_for(path, when, n)
		if not os.path.exists(candidate):
			break
	else:
		raise RotationConflictError(path, archive_path_for(path, when))
	os.rename(path, candidate)
	logger.info("Rotated %s -> %s", path, candidate)
	return candidate
