"""Ceph command execution and status decoding."""

from rookcheck.ceph.command_runner import CephCommandRunner
from rookcheck.ceph.status import decode_status

__all__ = [
    "CephCommandRunner",
    "decode_status",
]
