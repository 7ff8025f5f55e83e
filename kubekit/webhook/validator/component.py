from __future__ import annotations

import inspect
from typing import Any, Callable

from kubekit.core import Component, Context, operation
from kubekit.core._async_helper import resolve
from kubekit.core.exceptions import NotSupportedError

from ._models import ValidateCreateFn, ValidateDeleteFn, ValidateUpdateFn

ValidatorOption = Callable[["Validator"], None]
"""Configures a validator during construction."""


def with_validate_create_fns(*fns: ValidateCreateFn) -> ValidatorOption:
    """Initializes the validator with the given creation functions."""

    def option(v: Validator) -> None:
        v._creation_chain = tuple(fns)

    return option


def with_validate_update_fns(*fns: ValidateUpdateFn) -> ValidatorOption:
    """Initializes the validator with the given update functions."""

    def option(v: Validator) -> None:
        v._update_chain = tuple(fns)

    return option


def with_validate_deletion_fns(*fns: ValidateDeleteFn) -> ValidatorOption:
    """Initializes the validator with the given deletion functions."""

    def option(v: Validator) -> None:
        v._deletion_chain = tuple(fns)

    return option


class Validator(Component):
    """Runs the configured validation chains in order.

    Each chain stops at the first function that raises, and the
    exception reaches the caller unchanged. Empty chains accept
    everything. The sync methods raise NotSupportedError on an async
    function, which only the avalidate_* methods can run.
    """

    _creation_chain: tuple[ValidateCreateFn, ...]
    _update_chain: tuple[ValidateUpdateFn, ...]
    _deletion_chain: tuple[ValidateDeleteFn, ...]

    def __init__(self, *options: ValidatorOption, **kwargs: Any):
        self._creation_chain = ()
        self._update_chain = ()
        self._deletion_chain = ()
        for option in options:
            option(self)
        super().__init__(**kwargs)

    @property
    def creation_chain(self) -> tuple[ValidateCreateFn, ...]:
        return self._creation_chain

    @property
    def update_chain(self) -> tuple[ValidateUpdateFn, ...]:
        return self._update_chain

    @property
    def deletion_chain(self) -> tuple[ValidateDeleteFn, ...]:
        return self._deletion_chain

    @operation()
    def validate_create(
        self, obj: Any, context: Context | None = None, **kwargs: Any
    ) -> None:
        """Run functions in creation chain in order.

        Args:
            obj: Object to be created.
            context: Validation context.
        """
        ctx = context if context is not None else Context.create()
        for fn in self._creation_chain:
            self._check_sync(fn(ctx, obj))

    @operation()
    def validate_update(
        self,
        old_obj: Any,
        new_obj: Any,
        context: Context | None = None,
        **kwargs: Any,
    ) -> None:
        """Run functions in update chain in order.

        Args:
            old_obj: Current object.
            new_obj: Proposed object.
            context: Validation context.
        """
        ctx = context if context is not None else Context.create()
        for fn in self._update_chain:
            self._check_sync(fn(ctx, old_obj, new_obj))

    @operation()
    def validate_delete(
        self, obj: Any, context: Context | None = None, **kwargs: Any
    ) -> None:
        """Run functions in deletion chain in order.

        Args:
            obj: Object to be deleted.
            context: Validation context.
        """
        ctx = context if context is not None else Context.create()
        for fn in self._deletion_chain:
            self._check_sync(fn(ctx, obj))

    @operation()
    async def avalidate_create(
        self, obj: Any, context: Context | None = None, **kwargs: Any
    ) -> None:
        ctx = context if context is not None else Context.create()
        for fn in self._creation_chain:
            await resolve(fn(ctx, obj))

    @operation()
    async def avalidate_update(
        self,
        old_obj: Any,
        new_obj: Any,
        context: Context | None = None,
        **kwargs: Any,
    ) -> None:
        ctx = context if context is not None else Context.create()
        for fn in self._update_chain:
            await resolve(fn(ctx, old_obj, new_obj))

    @operation()
    async def avalidate_delete(
        self, obj: Any, context: Context | None = None, **kwargs: Any
    ) -> None:
        ctx = context if context is not None else Context.create()
        for fn in self._deletion_chain:
            await resolve(fn(ctx, obj))

    @staticmethod
    def _check_sync(result: Any) -> None:
        if inspect.isawaitable(result):
            close = getattr(result, "close", None)
            if callable(close):
                close()
            raise NotSupportedError(
                "Async validation function in sync chain, use avalidate_*"
            )
