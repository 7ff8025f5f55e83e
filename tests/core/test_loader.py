# type: ignore
import pytest

from kubekit.core import Loader
from kubekit.core.exceptions import LoadError
from kubekit.storage.secret_store import Secret, SecretStore
from kubekit.storage.secret_store.providers.kubernetes import Kubernetes
from kubekit.storage.secret_store.providers.memory import Memory
from kubekit.webhook.validator import Validator

manifest = """
metadata:
  name: connection-secrets
components:
  secrets:
    type: kubekit.storage.secret_store
    parameters:
      default_scope: kubekit-system
    providers:
      local:
        type: memory
      cluster:
        type: kubernetes
        parameters:
          kubeconfig: ~/.kube/config
          context: kind-kubekit
  validator:
    type: kubekit.webhook.validator
"""


@pytest.fixture
def path(tmp_path):
    (tmp_path / "kubekit.yaml").write_text(manifest)
    return str(tmp_path)


def test_load_component_with_first_provider(path):
    loader = Loader(path=path)

    component = loader.load_component("secrets")

    assert isinstance(component, SecretStore)
    assert component.__handle__ == "secrets"
    assert component.default_scope == "kubekit-system"
    assert isinstance(component.__provider__, Memory)
    assert component.__provider__.__handle__ == "local"

    component.write_key_values(secret=Secret(name="db"), kv={"user": "admin"})
    response = component.read_key_values(
        secret=Secret(name="db", scope="kubekit-system")
    )
    assert response.result == {"user": b"admin"}


def test_load_component_with_named_provider(path):
    loader = Loader(path=path)

    component = loader.load_component("secrets", provider="cluster")

    assert isinstance(component.__provider__, Kubernetes)
    assert component.__provider__.kubeconfig == "~/.kube/config"
    assert component.__provider__.context == "kind-kubekit"
    assert component.__provider__.__component__ is component


def test_load_component_without_provider(path):
    loader = Loader(path=path)

    component = loader.load_component("validator")

    assert isinstance(component, Validator)
    assert component.__provider__ is None
    assert loader.get_component_type("validator") == (
        "kubekit.webhook.validator"
    )


def test_load_errors(path, tmp_path):
    loader = Loader(path=path)

    with pytest.raises(LoadError):
        loader.load_component("missing")

    with pytest.raises(LoadError):
        loader.load_component("secrets", provider="missing")

    with pytest.raises(LoadError):
        Loader(path=str(tmp_path / "missing"))
