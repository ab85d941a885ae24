"""Terminal front end for the slot machine engine."""

from .session import GameSession
from .terminal import TerminalKeys, TerminalRenderer

__all__ = ["GameSession", "TerminalKeys", "TerminalRenderer"]
