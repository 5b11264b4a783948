#!/usr/bin/env python3
"""
S3 Single-File Uploader

Upload one local file to an S3 bucket. Credentials and the target come
from environment variables.

Usage:
    ACCESSKEY=... SECRET=... BUCKET=... python run.py -f /path/to/file
    python run.py -h 1                # Show usage
"""

import sys
from src.cli import main

if __name__ == "__main__":
    sys.exit(main())
