"""
Cryptex Console Output
=======================

Rich-based console formatters for the Cryptex classical cipher library:
the cipher catalogue, encrypt/decrypt result panels, the Playfair key
square, the Rail Fence zigzag and the letter frequency profile.

Uses the shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import CryptexConsole
from cryptex.algorithms.playfair import PlayfairMatrix
from cryptex.algorithms.rail_fence import fence_grid
from cryptex.analyzers.frequency import FrequencyAnalyzer
from cryptex.core.errors import CryptexError
from cryptex.core.models import (
    CipherDescriptor,
    CipherResult,
    FrequencyResult,
    Operation,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_SECURITY_COLOURS: dict[int, str] = {
    1: "bold red",
    2: "bold dark_orange",
    3: "bold yellow",
    4: "green",
    5: "bold bright_green",
}

_CLASS_COLOURS: dict[str, str] = {
    "plaintext": "bright_blue",
    "monoalphabetic": "yellow",
    "transposition": "cyan",
    "polyalphabetic": "bright_magenta",
    "insufficient": "dim white",
}

# Longest text drawn as a Rail Fence diagram.
_MAX_FENCE_WIDTH = 120


class CryptexConsoleOutput:
    """Console output formatters for Cryptex results.

    Usage::

        console = CryptexConsole()
        output = CryptexConsoleOutput(console)
        output.display_ciphers(engine.list_ciphers())
        output.display_result(result, descriptor)
    """

    def __init__(self, console: Optional[CryptexConsole] = None) -> None:
        self.console = console or CryptexConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Catalogue
    # ------------------------------------------------------------------ #

    def display_ciphers(
        self, descriptors: Sequence[CipherDescriptor], *, details: bool = False
    ) -> None:
        """Table of available ciphers; *details* adds the historical note."""
        self.console.section("Available Ciphers")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Id", style="bold bright_white")
        tbl.add_column("Name")
        tbl.add_column("Key", justify="center")
        tbl.add_column("Security", justify="center")
        tbl.add_column("Description", ratio=2)

        for desc in descriptors:
            description = desc.description
            if details and desc.details:
                description = f"{desc.description}\n\n[dim]{desc.details}[/dim]"
            tbl.add_row(
                desc.id,
                desc.name,
                desc.key_type.value if desc.has_key else "-",
                self._security_meter(desc.security_level),
                description,
            )

        self._rich.print(tbl)

    @staticmethod
    def _security_meter(level: int) -> str:
        colour = _SECURITY_COLOURS.get(level, "white")
        return f"[{colour}]{'■' * level}[/{colour}]{'□' * (5 - level)}"

    # ------------------------------------------------------------------ #
    #  Result
    # ------------------------------------------------------------------ #

    def display_result(
        self, result: CipherResult, descriptor: CipherDescriptor
    ) -> None:
        """Panel showing input, key and output of one run."""
        verb = "Encryption" if result.operation is Operation.ENCRYPT else "Decryption"
        self.console.section(f"{descriptor.name} -- {verb}")

        body = Text()
        body.append("Input:  ", style="bold")
        body.append(f"{result.input_text}\n")
        if result.key is not None:
            body.append("Key:    ", style="bold")
            body.append(f"{result.key}\n", style="bold bright_yellow")
        body.append("Output: ", style="bold")
        body.append(result.output_text, style="bold bright_green")

        status = "ENCRYPTED" if result.operation is Operation.ENCRYPT else "DECRYPTED"
        self._rich.print(
            Panel(
                body,
                title=status,
                subtitle=f"{len(result.output_text)} chars | {result.elapsed_ms:.3f} ms",
                border_style="bright_green"
                if result.operation is Operation.ENCRYPT
                else "bright_blue",
            )
        )

        if result.normalized:
            self.console.warning(
                "This cipher drops case, spacing and punctuation; "
                "decryption recovers letters only."
            )

    # ------------------------------------------------------------------ #
    #  Playfair / Rail Fence views
    # ------------------------------------------------------------------ #

    def display_matrix(
        self, matrix: PlayfairMatrix, highlight: str = ""
    ) -> None:
        """Render the 5x5 key square; letters in *highlight* are emphasised."""
        marked = set(highlight.upper().replace("J", "I"))

        tbl = Table(
            title="Playfair Key Square",
            border_style="bright_cyan",
            show_header=False,
            show_lines=True,
        )
        for _ in range(5):
            tbl.add_column(justify="center", width=3)

        for row in matrix.rows:
            tbl.add_row(
                *(
                    f"[bold bright_yellow]{ch}[/bold bright_yellow]"
                    if ch in marked
                    else ch
                    for ch in row
                )
            )

        self._rich.print(tbl)

    def display_rail_fence(self, text: str, rails: int) -> None:
        """Draw the zigzag the plaintext follows across the rails.

        Texts wider than the terminal diagram allows are skipped.
        """
        if rails <= 1 or not text or len(text) > _MAX_FENCE_WIDTH:
            return
        grid = fence_grid(text, rails)

        lines = Text()
        for idx, row in enumerate(grid):
            for cell in row:
                if cell is None:
                    lines.append(". ", style="dim")
                else:
                    lines.append(f"{cell} ", style="bold bright_cyan")
            if idx < len(grid) - 1:
                lines.append("\n")

        self._rich.print(Panel(lines, title=f"Rail Fence ({rails} rails)", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Frequency profile
    # ------------------------------------------------------------------ #

    def display_frequency(self, result: FrequencyResult) -> None:
        """Summary panel and letter histogram for a frequency profile."""
        self.console.section("Frequency Profile")

        colour = _CLASS_COLOURS.get(result.likely_class.value, "white")
        summary = Text()
        summary.append("Letters Analysed: ", style="bold")
        summary.append(f"{result.letter_count:,}\n")
        summary.append("Index of Coincidence: ", style="bold")
        summary.append(
            f"{result.ic:.4f} (English {FrequencyAnalyzer.IC_ENGLISH:.4f}, "
            f"random {FrequencyAnalyzer.IC_RANDOM_26:.4f})\n"
        )
        summary.append("Chi-Squared vs English: ", style="bold")
        summary.append(f"{result.chi_squared:.2f}")
        summary.append(f" (p={result.chi_squared_p_value:.4f})\n")
        summary.append("Likely Class: ", style="bold")
        summary.append(result.likely_class.value.title(), style=colour)

        self._rich.print(Panel(summary, title="Summary", border_style="cyan"))

        if not result.letter_count:
            return

        tbl = Table(
            title="Letter Frequencies",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Letter", justify="center")
        tbl.add_column("Count", justify="right")
        tbl.add_column("Share", justify="right")
        tbl.add_column("", width=30)

        peak = max(result.distribution.values()) or 1.0
        for letter, share in result.distribution.items():
            if not result.counts.get(letter):
                continue
            width = max(1, int(share / peak * 28))
            tbl.add_row(
                letter,
                str(result.counts[letter]),
                f"{share:.2%}",
                f"[bright_cyan]{'█' * width}[/bright_cyan]",
            )

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Errors
    # ------------------------------------------------------------------ #

    def display_error(self, exc: CryptexError) -> None:
        self.console.error(f"{escape(exc.message)} ({exc.code})")
