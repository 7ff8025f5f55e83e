"""
Secret Store on Kubernetes Secrets.
"""

__all__ = ["Kubernetes"]

import base64
import copy
import os
from typing import Any

from kubernetes import client, config  # type: ignore
from kubernetes.client.exceptions import ApiException  # type: ignore

from kubekit.core import Context, get_logger
from kubekit.core.exceptions import BaseError, ConflictError, NotFoundError

from .._models import SecretObject
from ._base import BaseSecretStore

logger = get_logger(__name__)


class Kubernetes(BaseSecretStore):
    kubeconfig: str | dict[str, Any] | None
    context: str | None

    _api: Any

    def __init__(
        self,
        kubeconfig: str | dict[str, Any] | None = None,
        context: str | None = None,
        default_scope: str | None = None,
        api: Any | None = None,
        **kwargs: Any,
    ):
        """Initialize.

        Args:
            kubeconfig:
                Kubeconfig path or parsed kubeconfig.
                Falls back to the default kubeconfig, then in-cluster config.
            context:
                Kubeconfig context.
            default_scope:
                Namespace used for secrets without a scope.
            api:
                CoreV1Api instance to use instead of one built
                from the kubeconfig.
        """
        self.kubeconfig = kubeconfig
        self.context = context
        self._api = api
        super().__init__(default_scope=default_scope, **kwargs)

    def __setup__(self, context: Context | None = None) -> None:
        if self._api is not None:
            return
        api_client = self._init_api_client(
            kubeconfig=self._get_kubeconfig(), context=self._get_context()
        )
        self._api = client.CoreV1Api(api_client)

    def _get_kubeconfig(self) -> str | dict[str, Any] | None:
        if self.kubeconfig:
            return self.kubeconfig
        if self.__component__ and getattr(
            self.__component__, "kubeconfig", None
        ):
            return self.__component__.kubeconfig
        return None

    def _get_context(self) -> str | None:
        if self.context:
            return self.context
        if self.__component__ and getattr(
            self.__component__, "context", None
        ):
            return self.__component__.context
        return None

    def _init_api_client(
        self, kubeconfig: str | dict[str, Any] | None, context: str | None
    ) -> Any:
        if isinstance(kubeconfig, dict):
            return config.new_client_from_config_dict(
                config_dict=kubeconfig, context=context
            )
        if isinstance(kubeconfig, str) and kubeconfig:
            return config.new_client_from_config(
                config_file=os.path.expanduser(kubeconfig), context=context
            )
        # default kubeconfig (e.g., ~/.kube/config) or in-cluster
        try:
            return config.new_client_from_config(context=context)
        except config.ConfigException:
            logger.debug("No kubeconfig found, using in-cluster config")
            config.load_incluster_config()
            return client.ApiClient()

    def _get_object(self, name: str, namespace: str) -> SecretObject:
        logger.debug("Reading secret %s/%s", namespace, name)
        try:
            nobj = self._api.read_namespaced_secret(
                name=name, namespace=namespace
            )
        except ApiException as e:
            raise self._convert_error(e) from e
        return self._convert_from_native(nobj)

    def _create_object(self, obj: SecretObject) -> None:
        logger.debug("Creating secret %s/%s", obj.namespace, obj.name)
        try:
            self._api.create_namespaced_secret(
                namespace=obj.namespace,
                body=self._convert_to_native(obj),
            )
        except ApiException as e:
            raise self._convert_error(e) from e

    def _update_object(self, obj: SecretObject) -> None:
        logger.debug("Updating secret %s/%s", obj.namespace, obj.name)
        try:
            self._api.replace_namespaced_secret(
                name=obj.name,
                namespace=obj.namespace,
                body=self._convert_to_native(obj),
            )
        except ApiException as e:
            raise self._convert_error(e) from e

    def _delete_object(self, obj: SecretObject) -> None:
        logger.debug("Deleting secret %s/%s", obj.namespace, obj.name)
        try:
            self._api.delete_namespaced_secret(
                name=obj.name, namespace=obj.namespace
            )
        except ApiException as e:
            raise self._convert_error(e) from e

    def _convert_error(self, e: ApiException) -> Exception:
        if e.status == 404:
            return NotFoundError(e.reason)
        if e.status == 409:
            return ConflictError(e.reason)
        error = BaseError(f"({e.status}) {e.reason}")
        error.status_code = e.status or 500
        return error

    def _convert_to_native(self, obj: SecretObject) -> Any:
        # Unmanaged fields are kept from the fetched secret.
        if obj._native is not None:
            nobj = copy.deepcopy(obj._native)
        else:
            nobj = client.V1Secret(
                api_version="v1",
                kind="Secret",
                metadata=client.V1ObjectMeta(),
            )
        nobj.metadata.name = obj.name
        nobj.metadata.namespace = obj.namespace
        nobj.metadata.labels = obj.labels or None
        nobj.metadata.annotations = obj.annotations or None
        nobj.metadata.resource_version = obj.resource_version
        nobj.type = obj.type
        nobj.data = {
            k: base64.b64encode(v).decode("ascii")
            for k, v in obj.data.items()
        }
        return nobj

    def _convert_from_native(self, nobj: Any) -> SecretObject:
        metadata = nobj.metadata
        obj = SecretObject(
            name=metadata.name,
            namespace=metadata.namespace,
            type=nobj.type,
            labels=dict(metadata.labels or {}),
            annotations=dict(metadata.annotations or {}),
            data={
                k: base64.b64decode(v) for k, v in (nobj.data or {}).items()
            },
            resource_version=metadata.resource_version,
        )
        obj._native = nobj
        return obj
