from kubekit.core import Response
from kubekit.storage.secret_store import KeyValues, Secret, SecretObject

from ._providers import get_component


class SecretStoreSyncAndAsyncClient:
    def __init__(
        self,
        provider_type: str,
        async_call: bool,
        default_scope: str | None = None,
    ):
        self.client = get_component(provider_type, default_scope)
        self.async_call = async_call
        self.provider_type = provider_type

    async def read_key_values(self, secret: Secret) -> Response[KeyValues]:
        if self.async_call:
            return await self.client.aread_key_values(secret=secret)
        return self.client.read_key_values(secret=secret)

    async def write_key_values(
        self, secret: Secret, kv: KeyValues
    ) -> Response[None]:
        if self.async_call:
            return await self.client.awrite_key_values(secret=secret, kv=kv)
        return self.client.write_key_values(secret=secret, kv=kv)

    async def delete_key_values(
        self, secret: Secret, kv: KeyValues | None = None
    ) -> Response[None]:
        if self.async_call:
            return await self.client.adelete_key_values(secret=secret, kv=kv)
        return self.client.delete_key_values(secret=secret, kv=kv)

    def get_object(self, name: str, namespace: str) -> SecretObject:
        return self.client.__provider__._get_object(name, namespace)
