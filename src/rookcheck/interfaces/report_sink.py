"""Report sink interface for rendering check results."""

from abc import ABC, abstractmethod

from rookcheck.core.models import CheckResult


class ReportSink(ABC):
    """Destination for check results as the evaluator produces them."""

    @abstractmethod
    def write(self, result: CheckResult) -> None:
        """Render or store a single check result.

        Args:
            result: Completed check result
        """

    def close(self) -> None:
        """Flush anything buffered once the evaluation pass is over."""
