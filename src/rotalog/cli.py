# RotaLog — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import threading
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from .config import Settings, load_config
from .core.levels import Level
from .core.reader import LogReader
from .core.writer import LogWriter
from .errors import ConfigError
from .logging_config import configure_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _parse_level(value: Optional[str]) -> Optional[Level]:
	if value is None:
		return None
	try:
		return Level.parse(value)
	except ValueError:
		raise typer.BadParameter(f"expected one of INFO, WARNING, ERROR or 0-2, got {value!r}")


def _build_writer(cfg: Settings, config_path: str, echo: bool) -> LogWriter:
	try:
		return LogWriter.from_config_file(
			config_path, max_file_size_bytes=cfg.max_file_size_bytes, echo=echo
		)
	except ConfigError as exc:
		print(f"[red]{escape(str(exc))}[/red]")
		raise typer.Exit(code=2)


@app.command()
def write(
	message: str = typer.Argument(..., help="Message to log"),
	level: str = typer.Option("INFO", "--level", "-l", help="INFO, WARNING or ERROR"),
	config: Optional[str] = typer.Option(None, help="Path to logger.json (overrides env)"),
	quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not echo to the console"),
):
	"""Append one entry to the configured log file."""
	cfg = Settings()
	configure_logging(cfg.diagnostics_level)
	lvl = _parse_level(level)
	writer = _build_writer(cfg, config or cfg.config_path, echo=cfg.echo and not quiet)
	try:
		writer.log(message, lvl)
	except OSError as exc:
		print(f"[red]{escape(str(exc))}[/red]")
		raise typer.Exit(code=1)


@app.command()
def read(
	path: Optional[str] = typer.Argument(None, help="Log file (defaults to the configured one)"),
	level: Optional[str] = typer.Option(None, "--level", "-l", help="Only lines tagged with this level"),
	exact: bool = typer.Option(False, help="Match the level field instead of any [LEVEL] text"),
	config: Optional[str] = typer.Option(None, help="Path to logger.json (overrides env)"),
):
	"""Print lines from a log file, optionally filtered by level."""
	cfg = Settings()
	configure_logging(cfg.diagnostics_level)
	lvl = _parse_level(level)
	if path is None:
		try:
			path = load_config(config or cfg.config_path).log_file_path
		except ConfigError as exc:
			print(f"[red]{escape(str(exc))}[/red]")
			raise typer.Exit(code=2)
	if not LogReader(path).print_logs(lvl, console=Console(highlight=False, soft_wrap=True), exact=exact):
		raise typer.Exit(code=1)


@app.command()
def demo(
	threads: int = typer.Option(5, min=1, help="Number of producer threads"),
	config: Optional[str] = typer.Option(None, help="Path to logger.json (overrides env)"),
):
	"""Run concurrent producers, raise the level to ERROR, then show ERROR lines."""
	cfg = Settings()
	configure_logging(cfg.diagnostics_level)
	writer = _build_writer(cfg, config or cfg.config_path, echo=cfg.echo)

	def produce(n: int) -> None:
		writer.log(f"Thread {n}: INFO", Level.INFO)
		writer.log(f"Thread {n}: WARNING", Level.WARNING)
		writer.log(f"Thread {n}: ERROR", Level.ERROR)

	workers = [threading.Thread(target=produce, args=(i,)) for i in range(threads)]
	for t in workers:
		t.start()
	for t in workers:
		t.join()

	writer.set_level(Level.ERROR)
	writer.log("This INFO is filtered out", Level.INFO)
	writer.log("This ERROR is written", Level.ERROR)

	print("\n[bold]=== ERROR only ===[/bold]")
	LogReader(writer.log_file_path).print_logs(Level.ERROR, console=Console(highlight=False, soft_wrap=True))


@app.command("print-config")
def print_config(
	config: Optional[str] = typer.Option(None, help="Path to logger.json (overrides env)"),
):
	"""Print effective settings and the loaded logger config."""
	cfg = Settings()
	print(cfg.model_dump())
	try:
		logger_cfg = load_config(config or cfg.config_path)
	except ConfigError as exc:
		print(f"[red]{escape(str(exc))}[/red]")
		raise typer.Exit(code=2)
	print({"log_file_path": logger_cfg.log_file_path, "min_level": logger_cfg.min_level.name})


def main():
	app()


if __name__ == "__main__":
	main()
