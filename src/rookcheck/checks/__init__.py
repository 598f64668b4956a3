"""Health checks and the evaluator that runs them."""

from rookcheck.checks.census import CensusResult, PodCensus
from rookcheck.checks.check_registry import CheckRegistry, default_registry
from rookcheck.checks.evaluator import HealthEvaluator

__all__ = [
    "CensusResult",
    "CheckRegistry",
    "HealthEvaluator",
    "PodCensus",
    "default_registry",
]
