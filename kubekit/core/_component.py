from __future__ import annotations

from typing import Any

from ._async_helper import run_async
from ._context import Context
from ._operation import Operation
from ._provider import Provider
from ._type_converter import TypeConverter
from .exceptions import NotSupportedError


class Component:
    __provider__: Provider | None
    __handle__: str | None
    __type__: str
    __unpack__: bool

    def __init__(
        self,
        **kwargs,
    ):
        self.__provider__ = None
        self.__unpack__ = kwargs.pop("__unpack__", False)
        self.__handle__ = kwargs.pop("__handle__", None)
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        if "__provider__" in kwargs:
            self.__bind__(kwargs.pop("__provider__"))

    def __bind__(
        self,
        provider: Provider | dict | str | None,
    ) -> None:
        if provider is None:
            return
        if isinstance(provider, Provider):
            provider.__component__ = self
            self.__provider__ = provider
            return
        if isinstance(provider, dict):
            provider = dict(provider)
            type = provider.pop("type")
            parameters = provider.pop("parameters", dict())
        else:
            type = provider
            parameters = dict()
        from ._loader import Loader

        module_name = self.__class__.__module__.rsplit(".", 1)[0]
        provider_instance = Loader.load_provider_instance(
            path=f"{module_name}.providers.{type}",
            parameters=parameters,
        )
        self.__bind__(provider=provider_instance)

    def __setup__(self, context: Context | None = None) -> None:
        if self.__provider__ is not None:
            self.__provider__.__setup__(context=context)

    async def __asetup__(self, context: Context | None = None) -> None:
        if self.__provider__ is not None:
            await self.__provider__.__asetup__(context=context)

    def __run__(
        self,
        operation: dict | str | Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        current_context = Context.create(context)
        op = self._convert_operation(operation)
        if self.__provider__ is not None:
            response = self.__provider__.__run__(
                operation=op,
                context=current_context,
                **kwargs,
            )
        elif op is not None and op.name:
            func = getattr(self, op.name, None)
            if not (func and callable(func)):
                raise NotSupportedError(str(op))
            args = TypeConverter.convert_args(func, op.args or {})
            response = func(**args)
        else:
            raise NotSupportedError()
        return self._unpack(response)

    async def __arun__(
        self,
        operation: dict | str | Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        current_context = Context.create(context)
        op = self._convert_operation(operation)
        if self.__provider__ is not None:
            response = await self.__provider__.__arun__(
                operation=op,
                context=current_context,
                **kwargs,
            )
        else:
            afunc = getattr(self, f"a{op.name}", None) if op else None
            if afunc and callable(afunc):
                args = TypeConverter.convert_args(afunc, op.args or {})
                response = await afunc(**args)
            else:
                response = await run_async(
                    self.__run__,
                    operation=op,
                    context=current_context,
                    **kwargs,
                )
        return self._unpack(response)

    def _unpack(self, response: Any) -> Any:
        from ._response import Response

        if self.__unpack__ and isinstance(response, Response):
            return response.result
        return response

    def _convert_operation(
        self,
        operation: dict | str | Operation | None,
    ) -> Operation | None:
        if isinstance(operation, dict):
            return Operation.from_dict(operation)
        elif isinstance(operation, str):
            return Operation(name=operation)
        return operation
