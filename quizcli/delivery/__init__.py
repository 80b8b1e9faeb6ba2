"""
Console delivery: rendering helpers and operator prompts.
"""

from .prompts import Prompter
from .visuals import get_prompt, results_panel, screen_header

__all__ = [
    "Prompter",
    "get_prompt",
    "results_panel",
    "screen_header",
]
