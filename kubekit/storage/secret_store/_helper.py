from pydantic import ValidationError

from ._constants import SECRET_TYPE_CONNECTION
from ._models import KeyValues, SecretMetadata, SecretObject
from .exceptions import ParseMetadataError


def parse_metadata(metadata: bytes | None) -> SecretMetadata | None:
    if metadata is None:
        return None
    try:
        return SecretMetadata.from_json(metadata)
    except ValidationError as e:
        raise ParseMetadataError(e) from e


def build_secret_object(
    name: str,
    namespace: str,
    kv: KeyValues | None,
    metadata: SecretMetadata | None,
) -> SecretObject:
    if metadata is None:
        metadata = SecretMetadata()
    return SecretObject(
        name=name,
        namespace=namespace,
        type=metadata.type or SECRET_TYPE_CONNECTION,
        labels=dict(metadata.labels or {}),
        annotations=dict(metadata.annotations or {}),
        data=dict(kv or {}),
    )


def merge_data(current: SecretObject, desired: SecretObject) -> None:
    """Keeps stored keys the desired object does not set."""
    for k, v in current.data.items():
        if k not in desired.data:
            desired.data[k] = v


def remove_keys(obj: SecretObject, kv: KeyValues) -> None:
    for k in kv:
        obj.data.pop(k, None)


def has_same_content(a: SecretObject, b: SecretObject) -> bool:
    return (
        a.type == b.type
        and a.labels == b.labels
        and a.annotations == b.annotations
        and a.data == b.data
    )
