# RotaLog — Logging configuration for the package's own diagnostics
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging


def configure_logging(level: str = "WARNING") -> None:
	"""Send rotalog's internal diagnostics (rotations, fallbacks) to stderr.

	Entries written by LogWriter never go through here.
	"""
	fmt = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"

	pkg = logging.getLogger("rotalog")
	pkg.setLevel(getattr(logging, level.upper(), logging.WARNING))

	# Clear existing handlers in case of re-init
	for h in list(pkg.handlers):
		pkg.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(fmt))
	pkg.addHandler(stream)
