__all__ = [
    "BaseError",
    "BadRequestError",
    "ConflictError",
    "LoadError",
    "NotFoundError",
    "NotSupportedError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class NotFoundError(BaseError):
    status_code = 404


class ConflictError(BaseError):
    status_code = 409


class NotSupportedError(BaseError):
    status_code = 415


class LoadError(Exception):
    status_code = 500
