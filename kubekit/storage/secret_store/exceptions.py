from kubekit.core.exceptions import BaseError

__all__ = [
    "ApplySecretError",
    "DeleteSecretError",
    "GetSecretError",
    "ParseMetadataError",
    "SecretStoreError",
    "UpdateSecretError",
]


class SecretStoreError(BaseError):
    """Secret store failure wrapping the underlying cause."""

    status_code = 500
    message = "secret store error"

    cause: BaseException | None

    def __init__(self, cause: BaseException | None = None):
        self.cause = cause
        if cause is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {cause}")


class GetSecretError(SecretStoreError):
    message = "cannot get secret"


class ParseMetadataError(SecretStoreError):
    status_code = 400
    message = "cannot parse metadata"


class ApplySecretError(SecretStoreError):
    message = "cannot apply secret"


class DeleteSecretError(SecretStoreError):
    message = "cannot delete secret"


class UpdateSecretError(SecretStoreError):
    message = "cannot update secret"
