from __future__ import annotations

from typing import Any

from kubekit.core import Component, Response, operation
from kubekit.core.exceptions import BadRequestError

from ._constants import STORE_TYPE_KUBERNETES, STORE_TYPE_MEMORY
from ._models import KeyValues, Secret, SecretStoreConfig


class SecretStore(Component):
    default_scope: str | None
    kubeconfig: str | dict[str, Any] | None
    context: str | None

    def __init__(
        self,
        default_scope: str | None = None,
        kubeconfig: str | dict[str, Any] | None = None,
        context: str | None = None,
        **kwargs: Any,
    ):
        """Initialize.

        Args:
            default_scope:
                Scope used for secrets without one.
            kubeconfig:
                Kubeconfig path or parsed kubeconfig.
            context:
                Kubeconfig context.
        """
        self.default_scope = default_scope
        self.kubeconfig = kubeconfig
        self.context = context
        super().__init__(**kwargs)

    @staticmethod
    def from_config(config: SecretStoreConfig, **kwargs: Any) -> SecretStore:
        """Create a secret store from store settings.

        Args:
            config: Store settings.

        Returns:
            Secret store bound to the provider of the configured type.

        Raises:
            BadRequestError: Unknown store type.
        """
        providers = {
            STORE_TYPE_KUBERNETES: "kubernetes",
            STORE_TYPE_MEMORY: "memory",
        }
        if config.type not in providers:
            raise BadRequestError(f"Unknown secret store type {config.type}")
        kubernetes = config.kubernetes
        return SecretStore(
            default_scope=config.default_scope,
            kubeconfig=kubernetes.kubeconfig if kubernetes else None,
            context=kubernetes.context if kubernetes else None,
            __provider__=providers[config.type],
            **kwargs,
        )

    @operation()
    def read_key_values(
        self,
        secret: Secret,
        **kwargs: Any,
    ) -> Response[KeyValues]:
        """Read all key values of a secret.

        Args:
            secret: Secret reference.

        Returns:
            Stored key values.

        Raises:
            GetSecretError: Secret could not be fetched, including
                when it does not exist.
        """
        raise NotImplementedError

    @operation()
    def write_key_values(
        self,
        secret: Secret,
        kv: KeyValues,
        **kwargs: Any,
    ) -> Response[None]:
        """Write key values to a secret.

        Keys already stored but not in kv are kept. Type, labels and
        annotations are replaced with the ones in the secret metadata.

        Args:
            secret: Secret reference with optional metadata.
            kv: Key values to add or overwrite.

        Returns:
            None.

        Raises:
            ParseMetadataError: Secret metadata is malformed.
            ApplySecretError: Secret could not be created or updated.
        """
        raise NotImplementedError

    @operation()
    def delete_key_values(
        self,
        secret: Secret,
        kv: KeyValues | None = None,
        **kwargs: Any,
    ) -> Response[None]:
        """Delete key values from a secret.

        A secret that does not exist is treated as deleted.

        Args:
            secret: Secret reference.
            kv: Keys to remove. The whole secret is deleted if empty.

        Returns:
            None.

        Raises:
            GetSecretError: Secret could not be fetched.
            DeleteSecretError: Secret could not be deleted.
            UpdateSecretError: Secret could not be updated.
        """
        raise NotImplementedError

    @operation()
    async def aread_key_values(
        self,
        secret: Secret,
        **kwargs: Any,
    ) -> Response[KeyValues]:
        """Read all key values of a secret.

        Args:
            secret: Secret reference.

        Returns:
            Stored key values.

        Raises:
            GetSecretError: Secret could not be fetched, including
                when it does not exist.
        """
        raise NotImplementedError

    @operation()
    async def awrite_key_values(
        self,
        secret: Secret,
        kv: KeyValues,
        **kwargs: Any,
    ) -> Response[None]:
        """Write key values to a secret.

        Args:
            secret: Secret reference with optional metadata.
            kv: Key values to add or overwrite.

        Returns:
            None.

        Raises:
            ParseMetadataError: Secret metadata is malformed.
            ApplySecretError: Secret could not be created or updated.
        """
        raise NotImplementedError

    @operation()
    async def adelete_key_values(
        self,
        secret: Secret,
        kv: KeyValues | None = None,
        **kwargs: Any,
    ) -> Response[None]:
        """Delete key values from a secret.

        Args:
            secret: Secret reference.
            kv: Keys to remove. The whole secret is deleted if empty.

        Returns:
            None.

        Raises:
            GetSecretError: Secret could not be fetched.
            DeleteSecretError: Secret could not be deleted.
            UpdateSecretError: Secret could not be updated.
        """
        raise NotImplementedError
