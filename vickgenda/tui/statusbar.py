"""One-line status bar showing the application name, version and context."""

from __future__ import annotations

from dataclasses import dataclass

_RESET = "\x1b[0m"
_BAR_ON = "\x1b[38;5;250;48;5;235m"  # light grey on dark grey
_BOLD_ON, _BOLD_OFF = "\x1b[1m", "\x1b[22m"
_FAINT_ON, _FAINT_OFF = "\x1b[2m", "\x1b[22m"
_ITALIC_ON, _ITALIC_OFF = "\x1b[3m", "\x1b[23m"


@dataclass
class StatusBar:
    """State of the status bar; fields may be changed freely by the owner."""

    app_name: str = "Vickgenda"
    version: str = "0.1.0"
    current_context: str = "Navegação"
    styled: bool = True

    def render(self) -> str:
        """Return the bar as a single padded line, with ANSI styling when ``styled``."""
        version = f"v{self.version}"
        context = f"Contexto: {self.current_context}"
        if not self.styled:
            return f" {self.app_name} {version} | {context} "
        text = (
            f"{_BOLD_ON}{self.app_name}{_BOLD_OFF} "
            f"{_FAINT_ON}{version}{_FAINT_OFF} | "
            f"{_ITALIC_ON}{context}{_ITALIC_OFF}"
        )
        return f"{_BAR_ON} {text} {_RESET}"