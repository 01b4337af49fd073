"""Shell commands for ADSPath."""

from .command_handler import CommandHandler

__all__ = ['CommandHandler']
