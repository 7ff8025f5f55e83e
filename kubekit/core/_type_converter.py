import inspect
import json
from typing import Any, get_args, get_origin, get_type_hints


class TypeConverter:
    """Converts loosely typed operation arguments to the annotated types.

    Arguments arrive from code, from a manifest or from a serialized
    operation, so models may come in as dicts or JSON and byte values as
    strings.
    """

    @staticmethod
    def convert_value(value: Any, expected_type: Any) -> Any:
        if expected_type is None or value is None:
            return value
        origin = get_origin(expected_type)

        # Optional[T]
        if origin is not None and type(None) in get_args(expected_type):
            expected_type = next(
                t for t in get_args(expected_type) if t is not type(None)
            )
            origin = get_origin(expected_type)

        if isinstance(value, dict) and origin is dict:
            key_type, val_type = get_args(expected_type) or (Any, Any)
            return {
                TypeConverter.convert_value(
                    k, key_type
                ): TypeConverter.convert_value(v, val_type)
                for k, v in value.items()
            }

        from_dict = getattr(expected_type, "from_dict", None)
        if callable(from_dict):
            if isinstance(value, dict):
                return from_dict(value)
            if isinstance(value, str):
                return from_dict(json.loads(value))

        if expected_type is bytes and isinstance(value, str):
            return value.encode()
        if expected_type is str and isinstance(value, (int, float)):
            return str(value)
        return value

    @staticmethod
    def convert_args(method, args: dict) -> dict:
        sig = inspect.signature(method)
        hints = get_type_hints(method)
        converted_args: dict = {}
        for param_name in sig.parameters:
            if param_name in args:
                converted_args[param_name] = TypeConverter.convert_value(
                    args[param_name], hints.get(param_name, None)
                )
        return args | converted_args
