import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from ._operation import Operation
from .exceptions import NotSupportedError

T = TypeVar("T", bound=Callable[..., Any])


def operation(**config: Any) -> Callable[[T], T]:
    """Marks a component method as an operation.

    When the component is bound to a provider, the call is packed into an
    ``Operation`` and run by the provider. Async operations are named with
    an ``a`` prefix and map to the operation without the prefix.
    """

    def decorator(func: T) -> T:
        setattr(func, "__operation__", True)
        setattr(func, "__config__", config)

        def to_operation(name: str, args: tuple, kwargs: dict) -> Operation:
            sig = inspect.signature(func)
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()
            return Operation.normalize(
                name=name, args=dict(bound_args.arguments)
            )

        if not inspect.iscoroutinefunction(func):

            @wraps(func)
            def wrapper(*args, **kwargs) -> Any:
                self = args[0]
                context = kwargs.pop("__context__", None)
                if getattr(self, "__provider__", None) is None:
                    return func(*args, **kwargs)
                op = to_operation(func.__name__, args, kwargs)
                try:
                    return self.__run__(op, context)
                except NotSupportedError:
                    return func(*args, **kwargs)

            return cast(T, wrapper)

        @wraps(func)
        async def awrapper(*args, **kwargs) -> Any:
            self = args[0]
            context = kwargs.pop("__context__", None)
            if getattr(self, "__provider__", None) is None:
                return await func(*args, **kwargs)
            op = to_operation(func.__name__[1:], args, kwargs)
            try:
                return await self.__arun__(op, context)
            except NotSupportedError:
                return await func(*args, **kwargs)

        return cast(T, awrapper)

    return decorator
