"""User interface components for the TV tuner application."""

from .app import TVApp, setup_logging
from .styles import TV_APP_CSS

__all__ = ['TVApp', 'TV_APP_CSS', 'setup_logging']
