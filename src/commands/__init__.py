"""Command system for ProductSetManager.

Each command is a class that inherits from BaseCommand and implements:
- name: command name (e.g., "get_product_set")
- help_text: brief description
- params: names of its positional arguments
- execute(api, location, *params): run the command logic
"""

from .base import BaseCommand, CommandRegistry

__all__ = ["BaseCommand", "CommandRegistry"]
