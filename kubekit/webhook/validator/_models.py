from typing import Any, Awaitable, Callable, TypeAlias

from kubekit.core import Context

ValidateCreateFn: TypeAlias = Callable[[Context, Any], Awaitable[None] | None]
"""Creation validation function. Raises to reject the object."""

ValidateUpdateFn: TypeAlias = Callable[
    [Context, Any, Any], Awaitable[None] | None
]
"""Update validation function receiving the old and the new object."""

ValidateDeleteFn: TypeAlias = Callable[[Context, Any], Awaitable[None] | None]
"""Deletion validation function. Raises to reject the deletion."""
