"""Reporter modules for uploader output."""

from .base import Reporter
from .console import ConsoleReporter

__all__ = ["Reporter", "ConsoleReporter"]
