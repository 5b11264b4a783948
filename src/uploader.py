"""Single-file upload to S3.

The file is read into memory in one read and handed to boto3's managed
transfer, which splits it into parts when it is larger than PART_SIZE.
Reading the whole file at once fails for files larger than free memory,
but keeps allocations to a minimum.
"""

import io
from typing import Any, Optional

from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import TransferConfig
from botocore.exceptions import BotoCoreError, ClientError

from src.models import UploadConfig, UploadResult
from src.s3_client import build_s3_client

# Memory set aside for buffered parts: 256 MiB
BUFFER_POOL_SIZE = 256 * 1024 * 1024

# Size of each multipart part: 80 MiB (same value as 20 << 22)
PART_SIZE = 80 * 1024 * 1024


class UploadError(Exception):
    """Raised when the file cannot be read or the upload fails."""

    pass


def build_transfer_config() -> TransferConfig:
    """Build the transfer configuration for the managed upload.

    Returns:
        TransferConfig with the fixed part size and the number of parts
        held in memory bounded by BUFFER_POOL_SIZE.
    """
    transfer_config = TransferConfig(
        multipart_threshold=PART_SIZE,
        multipart_chunksize=PART_SIZE,
    )
    transfer_config.max_in_memory_upload_chunks = max(1, BUFFER_POOL_SIZE // PART_SIZE)
    return transfer_config


def read_file(file_path: str) -> bytes:
    """Read a whole file into memory.

    Args:
        file_path: Path of the file to read.

    Returns:
        The file contents.

    Raises:
        UploadError: If the file is missing or cannot be read.
    """
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise UploadError(f"Cannot read file '{file_path}': {e}") from e


def upload_bytes(s3_client: Any, config: UploadConfig, body: bytes) -> None:
    """Upload a byte payload to the configured bucket and key.

    Args:
        s3_client: boto3 S3 client
        config: Upload configuration
        body: Payload to upload

    Raises:
        UploadError: If the storage service rejects the upload.
    """
    try:
        s3_client.upload_fileobj(
            io.BytesIO(body),
            config.bucket_name,
            config.folder,
            Config=build_transfer_config(),
        )
    except (S3UploadFailedError, ClientError, BotoCoreError) as e:
        raise UploadError(
            f"Upload to s3://{config.bucket_name}/{config.folder.lstrip('/')} failed: {e}"
        ) from e


def upload_file(
    config: UploadConfig,
    file_path: str,
    s3_client: Optional[Any] = None,
) -> UploadResult:
    """Read a file and upload it.

    The file is read before any client is created, so a bad path fails
    without touching the network.

    Args:
        config: Upload configuration
        file_path: Local file to upload
        s3_client: Client to use (built from config if omitted)

    Returns:
        UploadResult describing the uploaded object.
    """
    body = read_file(file_path)

    if s3_client is None:
        try:
            s3_client = build_s3_client(config)
        except BotoCoreError as e:
            raise UploadError(f"Cannot create S3 client: {e}") from e

    upload_bytes(s3_client, config, body)

    return UploadResult(
        file_path=file_path,
        bucket_name=config.bucket_name,
        key=config.folder,
        size_bytes=len(body),
    )
