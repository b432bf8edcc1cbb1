import os
from datetime import datetime

import pytest
from rotalog.errors import RotationConflictError
from rotalog.storage import rotation
from rotalog.storage.rotation import archive_path_for, rotate, should_rotate


WHEN = datetime(2025, 6, 1, 14, 30, 5)


def test_should_rotate_threshold(tmp_path):
	p = tmp_path / "app.log"
	assert not should_rotate(str(p), 10)
	p.write_bytes(b"123456789")
	assert not should_rotate(str(p), 10)
	p.write_bytes(b"1234567890")
	assert should_rotate(str(p), 10)


def test_archive_path_only_touches_extension():
	assert archive_path_for("logs/app.log", WHEN) == "logs/app_20250601_143005.log"
	assert archive_path_for("my.log.dir/app.log", WHEN) == "my.log.dir/app_20250601_143005.log"
	assert archive_path_for("service", WHEN) == "service_20250601_143005"
	assert archive_path_for("app.txt", WHEN, 2) == "app_20250601_143005_2.txt"


def test_rotate_moves_content(tmp_path):
	p = tmp_path / "app.log"
	p.write_text("old line\n", encoding="utf-8")
	archived = rotate(str(p), WHEN)
	assert archived == str(tmp_path / "app_20250601_143005.log")
	assert not p.exists()
	with open(archived, encoding="utf-8") as f:
		assert f.read() == "old line\n"


def test_rotate_same_second_gets_suffix(tmp_path):
	p = tmp_path / "app.log"
	first = tmp_path / "app_20250601_143005.log"
	first.write_text("first\n", encoding="utf-8")
	p.write_text("second\n", encoding="utf-8")
	archived = rotate(str(p), WHEN)
	assert archived == str(tmp_path / "app_20250601_143005_1.log")
	assert first.read_text(encoding="utf-8") == "first\n"


def test_rotate_raises_when_every_name_taken(tmp_path, monkeypatch):
	monkeypatch.setattr(rotation, "MAX_COLLISION_SUFFIX", 2)
	p = tmp_path / "app.log"
	p.write_text("data\n", encoding="utf-8")
	for n in range(3):
		(tmp_path / os.path.basename(archive_path_for(str(p), WHEN, n))).write_text("x", encoding="utf-8")
	with pytest.raises(RotationConflictError):
		rotate(str(p), WHEN)
	assert p.read_text(encoding="utf-8") == "data\n"


def test_rotate_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError):
		rotate(str(tmp_path / "nope.log"), WHEN)
