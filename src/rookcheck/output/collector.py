"""In-memory report sink."""

from rookcheck.core.models import CheckResult, ReportEntry, Severity
from rookcheck.interfaces.report_sink import ReportSink


class CollectingReportSink(ReportSink):
    """Keeps every written result, in order."""

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self.results: list[CheckResult] = []
        self.closed = False

    def write(self, result: CheckResult) -> None:
        """Store a check result."""
        self.results.append(result)

    def close(self) -> None:
        """Mark the evaluation pass as finished."""
        self.closed = True

    def entries(self, severity: Severity | None = None) -> list[ReportEntry]:
        """Get findings of one severity across all results.

        Args:
            severity: Severity to select; None selects listing lines

        Returns:
            Matching entries in emission order
        """
        return [e for r in self.results for e in r.entries if e.severity == severity]
