"""
Cryptex Console Interface
==========================

Rich-powered console abstraction providing a single presentation layer
for the Cryptex command-line tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers and severity-coloured messages,
all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Cryptex output
# ---------------------------------------------------------------------------
_CRYPTEX_THEME = Theme(
    {
        "cryptex.banner": "bold bright_cyan",
        "cryptex.section": "bold bright_magenta",
        "cryptex.success": "bold green",
        "cryptex.warning": "bold yellow",
        "cryptex.error": "bold red",
        "cryptex.info": "bold bright_blue",
        "cryptex.dim": "dim white",
        "cryptex.highlight": "bold bright_white",
        "cryptex.key": "bold bright_yellow",
        "cryptex.tagline": "dim italic bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
   ██████╗██████╗ ██╗   ██╗██████╗ ████████╗███████╗██╗  ██╗
  ██╔════╝██╔══██╗╚██╗ ██╔╝██╔══██╗╚══██╔══╝██╔════╝╚██╗██╔╝
  ██║     ██████╔╝ ╚████╔╝ ██████╔╝   ██║   █████╗   ╚███╔╝
  ██║     ██╔══██╗  ╚██╔╝  ██╔═══╝    ██║   ██╔══╝   ██╔██╗
  ╚██████╗██║  ██║   ██║   ██║        ██║   ███████╗██╔╝ ██╗
   ╚═════╝╚═╝  ╚═╝   ╚═╝   ╚═╝        ╚═╝   ╚══════╝╚═╝  ╚═╝
[/bright_cyan]"""

_TAGLINE = "Classical Cipher Toolkit -- historical, not secure"


class CryptexConsole:
    """Unified console interface for the Cryptex tool.

    Usage::

        con = CryptexConsole()
        con.banner()
        con.section("Result")
        con.success("Encrypted 42 characters")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_CRYPTEX_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Cryptex ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[cryptex.tagline]{_TAGLINE}[/cryptex.tagline]\n"
            f"[cryptex.dim]Version: {version}  |  {now}[/cryptex.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="cryptex.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[cryptex.success][✔] SUCCESS:[/cryptex.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[cryptex.warning][⚠] WARNING:[/cryptex.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[cryptex.error][✘] ERROR:[/cryptex.error] {message}"
        )
