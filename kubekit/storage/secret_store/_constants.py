SECRET_TYPE_CONNECTION = "connection.kubekit.io/v1alpha1"
"""Type of secrets written without an explicit type in their metadata."""

DEFAULT_SCOPE = "default"
"""Scope used when neither the secret nor the store names one."""

STORE_TYPE_KUBERNETES = "Kubernetes"
STORE_TYPE_MEMORY = "Memory"
