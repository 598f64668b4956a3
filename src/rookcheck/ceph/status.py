"""Decoding of `ceph status --format json` output."""

from pydantic import BaseModel, ConfigDict, ValidationError

from rookcheck.core.exceptions import StatusDecodeError
from rookcheck.core.models import ClusterStatusSnapshot, PlacementGroupStateEntry


class _HealthSection(BaseModel):
    model_config = ConfigDict(strict=True)

    status: str


class _PgMapSection(BaseModel):
    model_config = ConfigDict(strict=True)

    pgs_by_state: list[PlacementGroupStateEntry]


class _CephStatusDocument(BaseModel):
    """Subset of the ceph status document the health checks read.

    Every other field of the document is ignored.
    """

    model_config = ConfigDict(strict=True)

    health: _HealthSection
    pgmap: _PgMapSection


def decode_status(raw_text: str) -> ClusterStatusSnapshot:
    """Decode raw ceph status JSON into a snapshot.

    Args:
        raw_text: stdout of `ceph status --format json`

    Returns:
        Immutable snapshot holding overall health and PG state counts

    Raises:
        StatusDecodeError: If the text is not JSON or lacks `health.status`
            or a well-formed `pgmap.pgs_by_state` list
    """
    if not raw_text or not raw_text.strip():
        raise StatusDecodeError("ceph status output is empty")

    try:
        document = _CephStatusDocument.model_validate_json(raw_text)
    except ValidationError as e:
        raise StatusDecodeError(f"malformed ceph status output: {_summarize(e)}") from e

    return ClusterStatusSnapshot(
        overall_health=document.health.status,
        placement_group_states=tuple(document.pgmap.pgs_by_state),
    )


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "<document>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
