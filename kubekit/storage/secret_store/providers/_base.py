"""
Base secret store provider.

Providers implement four primitives on the backend object repository
(get, create, update, delete); the key value semantics are built on top
of them here.
"""

from typing import Any, Callable

from kubekit.core import Context, Provider, Response, get_logger
from kubekit.core.exceptions import NotFoundError

from .._constants import DEFAULT_SCOPE
from .._helper import (
    build_secret_object,
    has_same_content,
    merge_data,
    parse_metadata,
    remove_keys,
)
from .._models import KeyValues, Secret, SecretObject
from ..exceptions import (
    ApplySecretError,
    DeleteSecretError,
    GetSecretError,
    UpdateSecretError,
)

logger = get_logger(__name__)

MergeFn = Callable[[SecretObject, SecretObject], None]


class BaseSecretStore(Provider):
    default_scope: str | None

    def __init__(self, default_scope: str | None = None, **kwargs: Any):
        self.default_scope = default_scope
        super().__init__(**kwargs)

    def read_key_values(
        self,
        secret: Secret,
        **kwargs: Any,
    ) -> Response[KeyValues]:
        namespace = self._get_namespace(secret)
        try:
            obj = self._get_object(secret.name, namespace)
        except Exception as e:
            raise GetSecretError(e) from e
        return Response(result=dict(obj.data))

    def write_key_values(
        self,
        secret: Secret,
        kv: KeyValues | None = None,
        **kwargs: Any,
    ) -> Response[None]:
        metadata = parse_metadata(secret.metadata)
        desired = build_secret_object(
            name=secret.name,
            namespace=self._get_namespace(secret),
            kv=kv,
            metadata=metadata,
        )
        try:
            self._apply_object(desired, merge_data)
        except Exception as e:
            raise ApplySecretError(e) from e
        return Response(result=None)

    def delete_key_values(
        self,
        secret: Secret,
        kv: KeyValues | None = None,
        **kwargs: Any,
    ) -> Response[None]:
        namespace = self._get_namespace(secret)
        try:
            obj = self._get_object(secret.name, namespace)
        except NotFoundError:
            logger.info(
                "Secret %s/%s already deleted", namespace, secret.name
            )
            return Response(result=None)
        except Exception as e:
            raise GetSecretError(e) from e

        if not kv:
            try:
                self._delete_object(obj)
            except Exception as e:
                raise DeleteSecretError(e) from e
            return Response(result=None)

        remove_keys(obj, kv)
        try:
            self._update_object(obj)
        except Exception as e:
            raise UpdateSecretError(e) from e
        return Response(result=None)

    def _apply_object(self, desired: SecretObject, merge: MergeFn) -> None:
        try:
            current = self._get_object(desired.name, desired.namespace)
        except NotFoundError:
            self._create_object(desired)
            return
        merge(current, desired)
        if has_same_content(current, desired):
            logger.debug(
                "Secret %s/%s up to date", desired.namespace, desired.name
            )
            return
        # Fields outside this model stay as fetched.
        updated = current.copy(
            update={
                "type": desired.type,
                "labels": desired.labels,
                "annotations": desired.annotations,
                "data": desired.data,
            }
        )
        self._update_object(updated)

    def _get_namespace(self, secret: Secret) -> str:
        if secret.scope:
            return secret.scope
        if self.default_scope:
            return self.default_scope
        component = self.__component__
        if component is not None and getattr(
            component, "default_scope", None
        ):
            return component.default_scope
        return DEFAULT_SCOPE

    def _get_object(self, name: str, namespace: str) -> SecretObject:
        raise NotImplementedError

    def _create_object(self, obj: SecretObject) -> None:
        raise NotImplementedError

    def _update_object(self, obj: SecretObject) -> None:
        raise NotImplementedError

    def _delete_object(self, obj: SecretObject) -> None:
        raise NotImplementedError

    def __setup__(self, context: Context | None = None) -> None:
        pass
