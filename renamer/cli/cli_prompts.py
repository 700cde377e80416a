"""
cli_prompts.py - Interactive Prompts

Console input helpers used by the edit session
"""

from typing import Sequence


def input_choice(prompt: str, choices: Sequence[str], default: str = "n") -> str:
    """
    Ask until one of choices is entered

    Args:
        prompt: Prompt text
        choices: Accepted answers (lowercase)
        default: Answer used when input is closed (EOF or Ctrl-C)

    Returns:
        Selected choice
    """
    while True:
        try:
            value = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return default
        if value in choices:
            return value
