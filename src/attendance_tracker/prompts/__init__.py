from .base import Prompt
from .terminal import TerminalPrompt

__all__ = ["Prompt", "TerminalPrompt"]
