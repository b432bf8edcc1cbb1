# RotaLog — Console mirror (rich)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Dict, Optional

from rich.console import Console

from ..core.levels import Level


logger = logging.getLogger(__name__)

LEVEL_STYLES: Dict[Level, str] = {
	Level.INFO: "white",
	Level.WARNING: "yellow",
	Level.ERROR: "bold red",
}


class ConsoleMirror:
	"""Echo written lines to a console, coloured by level.

	Purely cosmetic: a failing console never reaches the caller.
	"""

	def __init__(self, console: Optional[Console] = None) -> None:
		self.console = console or Console(highlight=False, soft_wrap=True)

	def echo(self, line: str, level: Level) -> None:
		try:
			self.console.print(line, style=LEVEL_STYLES.get(level, ""), markup=False, highlight=False)
		except Exception:
			logger.debug("Console echo failed", exc_info=True)
