"""
S3 Single-File Uploader.

Reads one local file into memory and uploads it to an S3 bucket using
credentials and a target supplied through environment variables.
"""

__version__ = "1.0.0"

from src.cli import main

__all__ = ["main", "__version__"]
