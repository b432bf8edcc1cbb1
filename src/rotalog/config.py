# RotaLog — Configuration (logger.json loader + Pydantic BaseSettings for the CLI)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.levels import Level
from .errors import ConfigError


DEFAULT_CONFIG_PATH = "logger.json"
DEFAULT_LOG_FILE = "app.log"
DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024


class LoggerConfig(BaseModel):
	"""Writer configuration as stored in logger.json.

	Keys use the file's spelling (LogFilePath, MinLevel); attribute names work too.
	"""

	model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

	log_file_path: str = Field(default=DEFAULT_LOG_FILE, alias="LogFilePath", min_length=1)
	min_level: Level = Field(default=Level.INFO, alias="MinLevel")

	@field_validator("log_file_path")
	@classmethod
	def _path_not_blank(cls, v: str) -> str:
		if not v.strip():
			raise ValueError("LogFilePath must not be blank")
		return v

	@field_validator("min_level", mode="before")
	@classmethod
	def _level_is_integer(cls, v):
		# JSON must hold 0, 1 or 2; no bools, strings or floats
		if isinstance(v, Level) or type(v) is int:
			return v
		raise ValueError(f"MinLevel must be an integer 0, 1 or 2, got {v!r}")


def load_config(path: str = DEFAULT_CONFIG_PATH) -> LoggerConfig:
	"""Load logger config from a JSON file.

	A missing file yields the defaults. A file that exists but does not hold a
	valid config object raises ConfigError; there is no silent fallback.
	"""
	if not os.path.exists(path):
		return LoggerConfig()
	with open(path, "rb") as f:
		data = f.read()
	try:
		raw = data.decode("utf-8")
	except UnicodeDecodeError as exc:
		raise ConfigError(path, f"not valid UTF-8: {exc}") from exc
	try:
		return LoggerConfig.model_validate_json(raw)
	except ValidationError as exc:
		reason = "; ".join(err.get("msg", "invalid") for err in exc.errors()) or str(exc)
		raise ConfigError(path, reason) from exc


class Settings(BaseSettings):
	"""CLI settings with sane defaults.

	Environment variables are prefixed with ROTALOG_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="ROTALOG_", env_file=".env", extra="ignore")

	config_path: str = Field(default=DEFAULT_CONFIG_PATH)
	max_file_size_bytes: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
	diagnostics_level: str = Field(default="WARNING")
	echo: bool = Field(default=True)
