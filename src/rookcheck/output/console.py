"""Console report sink built on rich."""

from rich.console import Console
from rich.text import Text

from rookcheck.core.models import CheckResult, ReportEntry, Severity
from rookcheck.interfaces.report_sink import ReportSink

SEVERITY_STYLES = {
    Severity.INFO: ("Info", "green"),
    Severity.WARNING: ("Warning", "yellow"),
    Severity.ERROR: ("Error", "red"),
    Severity.FATAL: ("Fatal", "bold red"),
}


class ConsoleReportSink(ReportSink):
    """Render check results as leveled lines on a terminal.

    The check banner is printed as an Info line, findings are prefixed with
    their severity, pod listings are printed verbatim as tab-separated rows and a blank line
    separates consecutive checks.
    """

    def __init__(self, console: Console | None = None):
        """Initialize console sink.

        Args:
            console: Rich console to print to (default: stdout)
        """
        self.console = console or Console(highlight=False)
        self._written = 0

    def write(self, result: CheckResult) -> None:
        """Print a check result."""
        if self._written:
            self.console.print()
        self._written += 1

        self._print_finding(Severity.INFO, result.description)
        for entry in result.entries:
            self._print_entry(entry)

    def _print_entry(self, entry: ReportEntry) -> None:
        if entry.severity is None:
            # Bypass rich rendering, which would expand the tab separators
            print(entry.message, file=self.console.file)
        else:
            self._print_finding(entry.severity, entry.message)

    def _print_finding(self, severity: Severity, message: str) -> None:
        label, style = SEVERITY_STYLES[severity]
        self.console.print(Text.assemble((f"{label}:", style), " ", message), soft_wrap=True)
