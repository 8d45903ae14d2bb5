"""Console output helpers for the romanus command-line tool.

Results go to stdout, errors and debug lines go to stderr. User-provided
text is always appended as plain Text so it is never parsed as markup.
"""
from rich.console import Console
from rich.text import Text


class ConsolePrinter:
    """Print labelled results, errors and debug lines.
    
    Attributes:
        bare: Print only the value or message, without the label
        debug: Whether debug lines are printed at all
        
    Example:
        >>> printer = ConsolePrinter(color=False)
        >>> printer.result("MCXLII")
        RESULT: MCXLII
    """

    def __init__(self, bare: bool = False, debug: bool = False, color: bool = True):
        self.bare = bare
        self.debug_enabled = debug
        color_system = "auto" if color else None
        self.out = Console(color_system=color_system, highlight=False, soft_wrap=True)
        self.err = Console(stderr=True, color_system=color_system, highlight=False, soft_wrap=True)

    def result(self, value) -> None:
        """Print a conversion result on stdout."""
        self.out.print(self._line("RESULT: ", "bold green", str(value)))

    def error(self, message: str) -> None:
        """Print an error message on stderr."""
        self.err.print(self._line("ERROR: ", "bold red", message))

    def debug(self, message: str) -> None:
        """Print a debug line on stderr, if debugging is enabled."""
        if self.debug_enabled:
            self.err.print(Text.assemble(("DEBUG: ", "dim"), (message, "dim")))

    def _line(self, label: str, style: str, text: str) -> Text:
        if self.bare:
            return Text(text)
        return Text.assemble((label, style), text)
