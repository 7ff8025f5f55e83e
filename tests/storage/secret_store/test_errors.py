# type: ignore
import pytest

from kubekit.core.exceptions import BaseError, ConflictError, NotFoundError
from kubekit.storage.secret_store import (
    SECRET_TYPE_CONNECTION,
    ApplySecretError,
    DeleteSecretError,
    GetSecretError,
    ParseMetadataError,
    Secret,
    SecretObject,
    SecretStore,
    UpdateSecretError,
)
from kubekit.storage.secret_store.providers._base import BaseSecretStore

from ._data import kv, secret_name, secret_scope

error_boom = RuntimeError("boom")


class MockSecretStore(BaseSecretStore):
    def __init__(
        self,
        get=None,
        create=None,
        update=None,
        delete=None,
        **kwargs,
    ):
        self.mock_get = get
        self.mock_create = create
        self.mock_update = update
        self.mock_delete = delete
        self.calls = []
        super().__init__(**kwargs)

    def _get_object(self, name, namespace):
        self.calls.append(("get", name, namespace))
        return self._call(self.mock_get, name, namespace)

    def _create_object(self, obj):
        self.calls.append(("create", obj))
        return self._call(self.mock_create, obj)

    def _update_object(self, obj):
        self.calls.append(("update", obj))
        return self._call(self.mock_update, obj)

    def _delete_object(self, obj):
        self.calls.append(("delete", obj))
        return self._call(self.mock_delete, obj)

    def _call(self, mock, *args):
        if mock is None:
            pytest.fail("unexpected backend call")
        if isinstance(mock, BaseException):
            raise mock
        return mock(*args)


def fake_object(**kwargs) -> SecretObject:
    return SecretObject(
        name=secret_name,
        namespace=secret_scope,
        type=SECRET_TYPE_CONNECTION,
        **kwargs,
    )


def secret(**kwargs) -> Secret:
    return Secret(name=secret_name, scope=secret_scope, **kwargs)


def test_read_cannot_get_secret():
    store = SecretStore(__provider__=MockSecretStore(get=error_boom))

    with pytest.raises(GetSecretError) as exc_info:
        store.read_key_values(secret=Secret(name=secret_name))
    assert exc_info.value.cause is error_boom
    assert exc_info.value.__cause__ is error_boom
    assert str(exc_info.value) == "cannot get secret: boom"


def test_read_not_found_is_an_error():
    store = SecretStore(
        __provider__=MockSecretStore(get=NotFoundError("not found"))
    )

    with pytest.raises(GetSecretError) as exc_info:
        store.read_key_values(secret=secret())
    assert isinstance(exc_info.value.cause, NotFoundError)


def test_read_returns_all_key_values():
    provider = MockSecretStore(get=lambda name, ns: fake_object(data=kv))
    store = SecretStore(__provider__=provider)

    response = store.read_key_values(secret=Secret(name=secret_name))
    assert response.result == kv
    assert provider.calls == [("get", secret_name, "default")]


def test_write_malformed_metadata_does_not_call_backend():
    provider = MockSecretStore()
    store = SecretStore(__provider__=provider)

    with pytest.raises(ParseMetadataError) as exc_info:
        store.write_key_values(
            secret=secret(metadata=b"malformed-json"), kv=kv
        )
    assert exc_info.value.cause is not None
    assert provider.calls == []


def test_write_metadata_with_wrong_types():
    provider = MockSecretStore()
    store = SecretStore(__provider__=provider)

    with pytest.raises(ParseMetadataError):
        store.write_key_values(
            secret=secret(metadata=b'{"labels": ["not", "a", "map"]}'),
            kv=kv,
        )
    assert provider.calls == []


def test_write_apply_failed():
    store = SecretStore(__provider__=MockSecretStore(get=error_boom))

    with pytest.raises(ApplySecretError) as exc_info:
        store.write_key_values(secret=secret(), kv=kv)
    assert exc_info.value.cause is error_boom


def test_write_create_failed():
    store = SecretStore(
        __provider__=MockSecretStore(
            get=NotFoundError(), create=ConflictError("exists")
        )
    )

    with pytest.raises(ApplySecretError) as exc_info:
        store.write_key_values(secret=secret(), kv=kv)
    assert isinstance(exc_info.value.cause, ConflictError)


def test_write_update_conflict():
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(
                data={"key1": b"value1"}, resource_version="7"
            ),
            update=ConflictError("modified"),
        )
    )

    with pytest.raises(ApplySecretError) as exc_info:
        store.write_key_values(secret=secret(), kv={"key2": b"value2"})
    assert isinstance(exc_info.value.cause, ConflictError)


def test_write_creates_secret_with_default_type():
    created = []
    provider = MockSecretStore(get=NotFoundError(), create=created.append)
    store = SecretStore(__provider__=provider)

    store.write_key_values(secret=secret(), kv=kv)

    assert created == [fake_object(data=kv)]


def test_write_patches_secret_with_new_key():
    updated = []
    provider = MockSecretStore(
        get=lambda name, ns: fake_object(
            data={"existing-key": b"existing-value"}, resource_version="3"
        ),
        update=updated.append,
    )
    store = SecretStore(__provider__=provider)

    store.write_key_values(secret=secret(), kv={"new-key": b"new-value"})

    assert updated == [
        fake_object(
            data={
                "existing-key": b"existing-value",
                "new-key": b"new-value",
            },
            resource_version="3",
        )
    ]


def test_write_does_not_update_up_to_date_secret():
    provider = MockSecretStore(get=lambda name, ns: fake_object(data=kv))
    store = SecretStore(__provider__=provider)

    store.write_key_values(secret=secret(), kv=kv)

    assert [call[0] for call in provider.calls] == ["get"]


def test_delete_cannot_get_secret():
    store = SecretStore(__provider__=MockSecretStore(get=error_boom))

    with pytest.raises(GetSecretError) as exc_info:
        store.delete_key_values(secret=secret())
    assert exc_info.value.cause is error_boom


def test_delete_already_deleted():
    provider = MockSecretStore(get=NotFoundError())
    store = SecretStore(__provider__=provider)

    response = store.delete_key_values(secret=secret())
    assert response.result is None
    response = store.delete_key_values(secret=secret(), kv=kv)
    assert response.result is None
    assert [call[0] for call in provider.calls] == ["get", "get"]


def test_delete_cannot_delete_secret():
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(), delete=error_boom
        )
    )

    with pytest.raises(DeleteSecretError) as exc_info:
        store.delete_key_values(secret=secret())
    assert exc_info.value.cause is error_boom


def test_delete_whole_secret_when_no_kv_supplied():
    deleted = []
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(data=kv),
            delete=deleted.append,
        )
    )

    store.delete_key_values(secret=secret(), kv={})

    assert deleted == [fake_object(data=kv)]


def test_delete_updates_remaining_keys():
    updated = []
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(data=dict(kv)),
            update=updated.append,
        )
    )

    store.delete_key_values(
        secret=secret(), kv={"key1": b"value1", "key2": b"value2"}
    )

    assert updated == [fake_object(data={"key3": b"value3"})]


def test_delete_cannot_update_secret():
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(data=dict(kv)),
            update=error_boom,
        )
    )

    with pytest.raises(UpdateSecretError) as exc_info:
        store.delete_key_values(secret=secret(), kv={"key1": b""})
    assert exc_info.value.cause is error_boom


def test_errors_carry_status_codes():
    assert issubclass(GetSecretError, BaseError)
    assert GetSecretError(error_boom).status_code == 500
    assert ParseMetadataError(error_boom).status_code == 400


def test_unpacked_component_returns_result():
    store = SecretStore(
        __provider__=MockSecretStore(
            get=lambda name, ns: fake_object(data=kv)
        ),
        __unpack__=True,
    )

    assert store.read_key_values(secret=secret()) == kv
