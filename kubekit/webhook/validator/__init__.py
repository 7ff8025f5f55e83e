from ._models import ValidateCreateFn, ValidateDeleteFn, ValidateUpdateFn
from .component import (
    Validator,
    ValidatorOption,
    with_validate_create_fns,
    with_validate_deletion_fns,
    with_validate_update_fns,
)

__all__ = [
    "ValidateCreateFn",
    "ValidateDeleteFn",
    "ValidateUpdateFn",
    "Validator",
    "ValidatorOption",
    "with_validate_create_fns",
    "with_validate_deletion_fns",
    "with_validate_update_fns",
]
