"""Configuration loading for the S3 uploader.

All settings come from environment variables:

    ACCESSKEY=xxx        # required
    SECRET=xxx           # required
    BUCKET=xxx           # required
    REGION=us-east-1     # optional, defaults to us-east-1
    FOLDER=/             # optional, object key, defaults to the bucket root

Missing required values are not an error here; the caller checks
UploadConfig.is_complete before uploading.
"""

import os
from typing import Mapping, Optional

from src.models import UploadConfig

ENV_ACCESS_KEY = "ACCESSKEY"
ENV_SECRET = "SECRET"
ENV_BUCKET = "BUCKET"
ENV_REGION = "REGION"
ENV_FOLDER = "FOLDER"

DEFAULT_REGION = "us-east-1"
# Uploads go to the root of the bucket unless FOLDER is set
DEFAULT_FOLDER = "/"

DEFAULTS = {
    ENV_REGION: DEFAULT_REGION,
    ENV_FOLDER: DEFAULT_FOLDER,
}


def get_env(key: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read a single environment variable, applying its default.

    Args:
        key: Environment variable name.
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        The variable value, the default for REGION and FOLDER when the
        variable is unset or empty, or "" for anything else that is unset.
    """
    if environ is None:
        environ = os.environ

    value = environ.get(key, "")
    if not value:
        return DEFAULTS.get(key, "")
    return value


def load_from_env(environ: Optional[Mapping[str, str]] = None) -> UploadConfig:
    """Build the upload configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        An UploadConfig. Required fields may be empty.
    """
    return UploadConfig(
        region_name=get_env(ENV_REGION, environ),
        aws_access_key_id=get_env(ENV_ACCESS_KEY, environ),
        aws_secret_access_key=get_env(ENV_SECRET, environ),
        bucket_name=get_env(ENV_BUCKET, environ),
        folder=get_env(ENV_FOLDER, environ),
    )
