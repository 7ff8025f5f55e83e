from kubekit.core.exceptions import ConflictError, NotFoundError

from ._constants import (
    DEFAULT_SCOPE,
    SECRET_TYPE_CONNECTION,
    STORE_TYPE_KUBERNETES,
    STORE_TYPE_MEMORY,
)
from ._models import (
    KeyValues,
    KubernetesConfig,
    Secret,
    SecretMetadata,
    SecretObject,
    SecretStoreConfig,
)
from .component import SecretStore
from .exceptions import (
    ApplySecretError,
    DeleteSecretError,
    GetSecretError,
    ParseMetadataError,
    SecretStoreError,
    UpdateSecretError,
)

__all__ = [
    "ApplySecretError",
    "ConflictError",
    "DEFAULT_SCOPE",
    "DeleteSecretError",
    "GetSecretError",
    "KeyValues",
    "KubernetesConfig",
    "NotFoundError",
    "ParseMetadataError",
    "SECRET_TYPE_CONNECTION",
    "STORE_TYPE_KUBERNETES",
    "STORE_TYPE_MEMORY",
    "Secret",
    "SecretMetadata",
    "SecretObject",
    "SecretStore",
    "SecretStoreConfig",
    "SecretStoreError",
    "UpdateSecretError",
]
