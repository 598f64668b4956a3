"""Unit tests for exception hierarchy."""

import pytest

from rookcheck.core.exceptions import (
    CephCommandError,
    ConfigurationError,
    KubernetesError,
    RookCheckError,
    StatusDecodeError,
)
from rookcheck.interfaces.exceptions import InterfaceError, KubernetesProviderError


@pytest.mark.parametrize(
    "exc_class",
    [ConfigurationError, KubernetesError, CephCommandError, StatusDecodeError],
)
def test_core_exceptions_inherit_base(exc_class: type[Exception]) -> None:
    """Test core exceptions can be caught as RookCheckError."""
    with pytest.raises(RookCheckError, match="boom"):
        raise exc_class("boom")


def test_provider_error_is_interface_error() -> None:
    """Test provider errors can be caught as InterfaceError."""
    with pytest.raises(InterfaceError):
        raise KubernetesProviderError("boom")
