"""S3 session and client factory for the uploader.

The session carries the static credential pair and region from the
environment; no session token is used.
"""

from typing import Optional

import boto3

from src.models import UploadConfig


def build_session(config: UploadConfig) -> boto3.session.Session:
    """Build a boto3 session scoped to the configured region.

    Args:
        config: Upload configuration with credentials and region.

    Returns:
        A boto3 Session using static credentials.
    """
    return boto3.session.Session(
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        aws_session_token=None,
        region_name=config.region_name,
    )


def build_s3_client(
    config: UploadConfig,
    session: Optional[boto3.session.Session] = None,
):
    """Build an S3 client for the given configuration.

    Args:
        config: Upload configuration.
        session: Existing session to reuse (built from config if omitted).

    Returns:
        A boto3 S3 client.
    """
    if session is None:
        session = build_session(config)
    return session.client("s3")
