"""
In Memory Secret Store.
"""

from __future__ import annotations

__all__ = ["Memory"]

from threading import Lock
from typing import Any

from kubekit.core import get_logger
from kubekit.core.exceptions import ConflictError, NotFoundError

from .._models import SecretObject
from ._base import BaseSecretStore

logger = get_logger(__name__)


class Memory(BaseSecretStore):
    # (namespace, name) -> object
    _db: dict[tuple[str, str], SecretObject]
    _version: int
    _lock: Lock

    def __init__(
        self,
        default_scope: str | None = None,
        **kwargs: Any,
    ):
        """Initialize.

        Args:
            default_scope:
                Scope used for secrets without one.
        """
        self._db = dict()
        self._version = 0
        self._lock = Lock()
        super().__init__(default_scope=default_scope, **kwargs)

    def _get_object(self, name: str, namespace: str) -> SecretObject:
        with self._lock:
            obj = self._db.get((namespace, name))
            if obj is None:
                raise NotFoundError(f"Secret {namespace}/{name} not found")
            return obj.copy(deep=True)

    def _create_object(self, obj: SecretObject) -> None:
        with self._lock:
            key = (obj.namespace, obj.name)
            if key in self._db:
                raise ConflictError(
                    f"Secret {obj.namespace}/{obj.name} already exists"
                )
            self._db[key] = self._store(obj)

    def _update_object(self, obj: SecretObject) -> None:
        with self._lock:
            key = (obj.namespace, obj.name)
            current = self._db.get(key)
            if current is None:
                raise NotFoundError(
                    f"Secret {obj.namespace}/{obj.name} not found"
                )
            if (
                obj.resource_version is not None
                and obj.resource_version != current.resource_version
            ):
                raise ConflictError(
                    f"Secret {obj.namespace}/{obj.name} has been modified"
                )
            self._db[key] = self._store(obj)

    def _delete_object(self, obj: SecretObject) -> None:
        with self._lock:
            key = (obj.namespace, obj.name)
            if key not in self._db:
                raise NotFoundError(
                    f"Secret {obj.namespace}/{obj.name} not found"
                )
            self._db.pop(key)

    def _store(self, obj: SecretObject) -> SecretObject:
        self._version += 1
        logger.debug(
            "Storing secret %s/%s at version %s",
            obj.namespace,
            obj.name,
            self._version,
        )
        return obj.copy(
            deep=True, update={"resource_version": str(self._version)}
        )
