from __future__ import annotations

import importlib
import inspect
import os
from typing import Any

from ._component import Component
from ._log_helper import get_logger
from ._provider import Provider
from ._type_converter import TypeConverter
from .exceptions import LoadError
from .manifest import MANIFEST_FILE, ComponentConfig, Manifest

logger = get_logger(__name__)


class Loader:
    """Builds components declared in a manifest file.

    A component entry names the component package in ``type`` (for example
    ``kubekit.storage.secret_store``), its constructor ``parameters`` and
    one or more providers. A provider ``type`` without a dot is resolved
    relative to the component package (``<type>.providers.<provider>``).
    """

    path: str
    manifest_path: str
    manifest: Manifest

    def __init__(
        self,
        path: str = ".",
        manifest: str = MANIFEST_FILE,
    ):
        self.path = path
        self.manifest_path = os.path.join(path, manifest)
        if not os.path.isfile(self.manifest_path):
            raise LoadError(f"Manifest {self.manifest_path} not found")
        self.manifest = Manifest.parse(path=self.manifest_path)

    def get_component_type(self, handle: str) -> str:
        return self._get_component_config(handle).type

    def load_component(
        self,
        handle: str,
        provider: str | None = None,
    ) -> Component:
        config = self._get_component_config(handle)
        provider_instance = None
        if config.providers:
            provider_handle = provider or next(iter(config.providers))
            if provider_handle not in config.providers:
                raise LoadError(
                    f"Provider {provider_handle} not found for {handle}"
                )
            pconfig = config.providers[provider_handle]
            provider_type = pconfig.type
            if "." not in provider_type:
                provider_type = f"{config.type}.providers.{provider_type}"
            provider_instance = Loader.load_provider_instance(
                path=provider_type,
                parameters=dict(
                    pconfig.parameters, __handle__=provider_handle
                ),
            )
        logger.debug("Loading component %s of type %s", handle, config.type)
        return Loader.load_component_instance(
            path=Loader.get_component_path(config.type),
            parameters=dict(config.parameters, __handle__=handle),
            provider=provider_instance,
        )

    def _get_component_config(self, handle: str) -> ComponentConfig:
        if handle not in self.manifest.components:
            raise LoadError(f"Component {handle} not found in manifest")
        return self.manifest.components[handle]

    @staticmethod
    def get_component_path(component_type: str) -> str:
        if ":" in component_type:
            return component_type
        return f"{component_type}.component"

    @staticmethod
    def load_provider_instance(
        path: str,
        parameters: dict[str, Any] = dict(),
    ) -> Provider:
        provider = Loader.load_class(path, Provider)
        converted_parameters = TypeConverter.convert_args(
            provider.__init__, parameters
        )
        return provider(**converted_parameters)

    @staticmethod
    def load_component_instance(
        path: str,
        parameters: dict[str, Any],
        provider: Provider | None,
    ) -> Component:
        component = Loader.load_class(path, Component)
        converted_parameters = TypeConverter.convert_args(
            component.__init__, parameters
        )
        if provider is None:
            return component(**converted_parameters)
        return component(__provider__=provider, **converted_parameters)

    @staticmethod
    def load_class(path: str, type: Any) -> Any:
        class_name = None
        if ":" in path:
            module_name, class_name = path.split(":", 1)
        else:
            module_name = path
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise LoadError(f"Cannot import {module_name}: {e}") from e
        if class_name is not None:
            cls = getattr(module, class_name, None)
            if cls is None:
                raise LoadError(f"{class_name} not found in {module_name}")
            return cls
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if cls.__module__ == module_name and issubclass(cls, type):
                return cls
        raise LoadError(f"{type.__name__} not found at {module_name}")
