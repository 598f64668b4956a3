"""Report sinks rendering check results."""

from rookcheck.output.collector import CollectingReportSink
from rookcheck.output.console import ConsoleReportSink

__all__ = [
    "CollectingReportSink",
    "ConsoleReportSink",
]
