"""Rook Ceph health inspector (rookcheck).

Inspect mon, osd and mgr pod placement and Ceph cluster health for Rook-managed
storage clusters running on Kubernetes.
"""

__version__ = "0.1.0"
__author__ = "Platform Engineering Team"
__license__ = "Apache-2.0"
