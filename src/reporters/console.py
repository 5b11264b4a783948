"""Console reporter using Rich library for formatted CLI output.

Usage and success messages go to stdout, errors go to stderr in bold red.
"""

from rich.console import Console
from rich.markup import escape

from src.reporters.base import Reporter
from src.models import UploadResult


USAGE_EXAMPLE = (
    "[bold red]ACCESSKEY[/bold red]=AWSACCESSKEY "
    "[bold red]SECRET[/bold red]=AWSSECRETKEY "
    "[bold red]BUCKET[/bold red]=BUCKETNAME "
    "[bold red]REGION[/bold red]=REGION "
    "[bold red]FOLDER[/bold red]=path/to/key "
    "[bold green]s3-upload[/bold green] -f /path/to/file "
    "(or [bold green]python run.py[/bold green] -f /path/to/file)"
)


class ConsoleReporter(Reporter):
    """Rich-based console reporter for CLI output.

    Args:
        no_color: If True, print plain text without styling
    """

    def __init__(self, no_color: bool = False):
        # Use legacy_windows=True for ASCII-safe output on Windows consoles
        self.console = Console(
            legacy_windows=True, no_color=no_color, highlight=False, emoji=False
        )
        self.error_console = Console(
            legacy_windows=True,
            no_color=no_color,
            highlight=False,
            emoji=False,
            stderr=True,
        )
        self.no_color = no_color

    def on_usage(self, missing: list[str]) -> None:
        """Print how to supply the configuration.

        Lists the required variables that are not set, if any.
        """
        self.console.print("Please define the arguments as environment variables! Ex:")
        self.console.print(USAGE_EXAMPLE, soft_wrap=True)
        if missing:
            self.console.print(
                f"[yellow]Missing:[/yellow] {', '.join(missing)}", soft_wrap=True
            )

    def on_success(self, result: UploadResult) -> None:
        self.console.print(
            f"File {escape(result.file_path)} uploaded at {escape(result.s3_uri)}",
            soft_wrap=True,
        )

    def on_error(self, error: BaseException) -> None:
        message = str(error) or error.__class__.__name__
        self.error_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
