"""Base reporter interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.models import UploadResult


class Reporter(ABC):
    """Abstract base class for uploader reporters."""

    @abstractmethod
    def on_usage(self, missing: list[str]) -> None:
        """Called when usage should be shown instead of uploading."""
        pass

    @abstractmethod
    def on_success(self, result: "UploadResult") -> None:
        """Called when the upload completes."""
        pass

    @abstractmethod
    def on_error(self, error: BaseException) -> None:
        """Called when any step of the upload fails."""
        pass
