"""Classification of Ceph health and placement-group states into severities.

These functions are pure: they map decoded values to report entries and leave
rendering to the report sinks.
"""

from rookcheck.core.models import PlacementGroupStateEntry, ReportEntry, Severity

HEALTH_SEVERITIES = {
    "HEALTH_OK": Severity.INFO,
    "HEALTH_WARN": Severity.WARNING,
    "HEALTH_ERR": Severity.ERROR,
}

CLEAN_PG_STATE = "active+clean"

# Substring match, checked before the catch-all
ERROR_PG_STATE_MARKERS = ("down", "incomplete", "snaptrim_error")


def classify_health(status: str) -> ReportEntry:
    """Classify an overall ceph health status.

    Unrecognized statuses are reported as warnings instead of being dropped.

    Args:
        status: Value of `health.status`

    Returns:
        Report entry for the status
    """
    severity = HEALTH_SEVERITIES.get(status)
    if severity is None:
        return ReportEntry(
            severity=Severity.WARNING,
            message=f"unrecognized ceph health status: {status}",
        )
    return ReportEntry(severity=severity, message=status)


def classify_pg_state(state_name: str) -> Severity:
    """Classify a composite placement-group state name."""
    if state_name == CLEAN_PG_STATE:
        return Severity.INFO
    if any(marker in state_name for marker in ERROR_PG_STATE_MARKERS):
        return Severity.ERROR
    return Severity.WARNING


def classify_pg_states(entries: tuple[PlacementGroupStateEntry, ...] | list) -> list[ReportEntry]:
    """Classify every placement-group state entry.

    Args:
        entries: Placement-group state counts, in reported order

    Returns:
        One report entry per state, in the same order
    """
    return [
        ReportEntry(
            severity=classify_pg_state(entry.state_name),
            message=f"PgState: {entry.state_name}, PgCount: {entry.count}",
        )
        for entry in entries
    ]
