"""Data models for the S3 uploader."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadConfig:
    """Upload target and credentials, read once from the environment."""

    region_name: str
    aws_access_key_id: str
    aws_secret_access_key: str = field(repr=False)
    bucket_name: str
    folder: str

    def missing_variables(self) -> list[str]:
        """Return the names of required variables that are empty."""
        required = {
            "ACCESSKEY": self.aws_access_key_id,
            "SECRET": self.aws_secret_access_key,
            "BUCKET": self.bucket_name,
        }
        return [name for name, value in required.items() if not value]

    @property
    def is_complete(self) -> bool:
        """True when every required variable has a value."""
        return not self.missing_variables()


@dataclass
class UploadResult:
    """Outcome of a successful upload."""

    file_path: str
    bucket_name: str
    key: str
    size_bytes: int

    @property
    def s3_uri(self) -> str:
        return f"s3://{self.bucket_name}"
