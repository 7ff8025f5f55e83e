from typing import Any, TypeAlias

from pydantic import PrivateAttr

from kubekit.core import DataModel

from ._constants import STORE_TYPE_KUBERNETES

KeyValues: TypeAlias = dict[str, bytes]
"""Secret payload: key to opaque byte value."""


class Secret(DataModel):
    """Secret reference."""

    name: str
    """Secret name, unique within its scope."""

    scope: str | None = None
    """Scope (namespace) of the secret. Store default if not set."""

    metadata: bytes | None = None
    """Serialized JSON metadata document applied on write."""


class SecretMetadata(DataModel):
    """Side-channel metadata of a secret."""

    labels: dict[str, str] | None = None
    """Labels set on the stored object."""

    annotations: dict[str, str] | None = None
    """Annotations set on the stored object."""

    type: str | None = None
    """Type of the stored object."""


class SecretObject(DataModel):
    """Secret object as kept by the backend."""

    name: str
    """Object name."""

    namespace: str
    """Object namespace."""

    type: str | None = None
    """Object type."""

    labels: dict[str, str] = dict()
    """Object labels."""

    annotations: dict[str, str] = dict()
    """Object annotations."""

    data: KeyValues = dict()
    """Object data."""

    resource_version: str | None = None
    """Backend version used for optimistic concurrency."""

    _native: Any = PrivateAttr(default=None)
    """Backend object this record was read from, if any."""


class KubernetesConfig(DataModel):
    """Kubernetes access settings."""

    kubeconfig: str | dict[str, Any] | None = None
    """Kubeconfig path or parsed kubeconfig. Default config if not set."""

    context: str | None = None
    """Kubeconfig context."""


class SecretStoreConfig(DataModel):
    """Secret store settings."""

    type: str = STORE_TYPE_KUBERNETES
    """Store type."""

    default_scope: str | None = None
    """Scope used for secrets without one."""

    kubernetes: KubernetesConfig | None = None
    """Kubernetes access settings for the Kubernetes store type."""
