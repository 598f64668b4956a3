"""Configuration management for rookcheck."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from rookcheck.core.exceptions import ConfigurationError
from rookcheck.core.models import CephClusterTarget, DaemonRole

DEFAULT_CONFIG_PATH = "~/.rookcheck/config.yaml"


class KubernetesConfig(BaseModel):
    """Kubernetes API access configuration."""

    kubeconfig_path: str | None = None
    context: str | None = None


class NamespacesConfig(BaseModel):
    """Namespaces of the Rook operator and the Ceph cluster."""

    operator: str = "rook-ceph"
    cluster: str = "rook-ceph"


class CephConfig(BaseModel):
    """How ceph commands are run and how daemon pods are found."""

    operator_label: str = "app=rook-ceph-operator"
    operator_container: str = "rook-ceph-operator"
    osd_container: str = "osd"
    connect_timeout: int = 10
    role_labels: dict[DaemonRole, str] = Field(default_factory=dict)

    def label_for(self, role: DaemonRole) -> str:
        """Get the label selector for a daemon role.

        Args:
            role: Daemon role

        Returns:
            Configured override, or Rook's default selector for the role
        """
        return self.role_labels.get(role, role.default_label_selector)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "console"
    output: str = "stderr"


class RookCheckConfig(BaseModel):
    """Main rookcheck configuration."""

    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)
    namespaces: NamespacesConfig = Field(default_factory=NamespacesConfig)
    ceph: CephConfig = Field(default_factory=CephConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: str | Path) -> "RookCheckConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            RookCheckConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        try:
            return cls(**(data or {}))
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def load(cls, path: str | Path | None = None) -> "RookCheckConfig":
        """Load configuration, falling back to defaults.

        A missing file at the default location is not an error; an explicitly
        requested path must exist.

        Args:
            path: Path to configuration file (optional)

        Returns:
            RookCheckConfig instance

        Raises:
            ConfigurationError: If an explicit file is missing or invalid
        """
        if path is None:
            if not Path(DEFAULT_CONFIG_PATH).expanduser().exists():
                return cls()
            path = DEFAULT_CONFIG_PATH

        return cls.from_file(path)

    @property
    def target(self) -> CephClusterTarget:
        """Cluster target described by the configured namespaces."""
        return CephClusterTarget(
            operator_namespace=self.namespaces.operator,
            cluster_namespace=self.namespaces.cluster,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation
        """
        return self.model_dump()
