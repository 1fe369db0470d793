"""Narrator - the single line-printing utility shared by every demo."""
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional

from rich.console import Console
from rich.panel import Panel

SEPARATOR = "-" * 55


class Narrator:
    """
    Writes narration lines to the console and keeps a transcript.

    Narration is the only product output of a demo. Every line written is
    also appended to :attr:`lines` so callers and tests can inspect exactly
    what a demo said without parsing console output.
    """

    def __init__(self, stream: Optional[IO[str]] = None, color: bool = True,
                 echo: bool = True):
        """
        Initialize the narrator.

        Args:
            stream: Where to write; standard output when omitted
            color: Allow styled output for banners
            echo: Write to the console as well as the transcript
        """
        self._console = Console(
            file=stream,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
            no_color=not color,
        )
        self._echo = echo
        self._lines: List[str] = []
        self._indent = 0

    @property
    def lines(self) -> List[str]:
        """Transcript of everything narrated so far."""
        return list(self._lines)

    def say(self, text: str = "") -> None:
        """Narrate one line (or several, if ``text`` contains newlines)."""
        prefix = "  " * self._indent
        for line in str(text).split("\n"):
            rendered = f"{prefix}{line}" if line else line
            self._lines.append(rendered)
            if self._echo:
                self._console.print(rendered)

    def blank(self) -> None:
        """Narrate an empty line."""
        self.say("")

    def banner(self, title: str) -> None:
        """Narrate a boxed title, used at the start and end of a demo."""
        self._lines.append(title)
        if self._echo:
            self._console.print(Panel(title, expand=False, style="bold"))

    def section(self, title: str) -> None:
        """Narrate a titled separator between scenarios."""
        self.say(SEPARATOR)
        self.say(f" {title}")
        self.say(SEPARATOR)

    def bullets(self, items: List[str]) -> None:
        """Narrate a list of short observations."""
        for item in items:
            self.say(f"  . {item}")

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Indent narration produced inside the block."""
        self._indent += 1
        try:
            yield
        finally:
            self._indent -= 1

    def clear(self) -> None:
        """Forget the transcript."""
        self._lines.clear()
