"""Registry of supported policy (cloud) types and their default IaC settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class _CloudProvider:
    iac_type: str
    iac_version: str
    policy_names: Callable[[], list[str]] | None = None

    @property
    def is_indirect(self) -> bool:
        return self.policy_names is not None


_providers: dict[str, _CloudProvider] = {}


def register_cloud_provider(cloud_type: str, iac_type_default: str, iac_version_default: str) -> None:
    """Register a policy type whose policies live in a directory of its own name."""
    _providers[cloud_type] = _CloudProvider(iac_type_default, iac_version_default)


def register_indirect_cloud_provider(
    cloud_type: str,
    iac_type_default: str,
    iac_version_default: str,
    get_policy_names: Callable[[], list[str]],
) -> None:
    """Register a policy type that expands to the policy types ``get_policy_names`` returns."""
    _providers[cloud_type] = _CloudProvider(iac_type_default, iac_version_default, get_policy_names)


def is_cloud_provider_supported(cloud_type: str) -> bool:
    """Return whether ``cloud_type`` is a registered policy type."""
    return cloud_type in _providers


def _lookup(cloud_type: str) -> _CloudProvider:
    try:
        return _providers[cloud_type]
    except KeyError:
        raise ValueError(f"cloud type '{cloud_type}' not supported") from None


def get_default_policy_paths(cloud_types: list[str], base_path: str) -> list[str]:
    """Return the default policy directories under ``base_path`` for ``cloud_types``.

    Indirect policy types are expanded into the types they stand for.
    Raises ``ValueError`` for an unregistered type.
    """
    names: list[str] = []
    for cloud_type in cloud_types:
        provider = _lookup(cloud_type)
        if provider.is_indirect:
            names.extend(provider.policy_names())
        else:
            names.append(cloud_type)

    paths: list[str] = []
    for name in names:
        if _lookup(name).is_indirect:
            raise ValueError(f"cloud type '{name}' has no policy path of its own")
        paths.append(f"{base_path}/{name}")
    return paths


def get_default_iac_type(cloud_type: str) -> str:
    """Return the default IaC type for a policy type, or an empty string if unknown."""
    provider = _providers.get(cloud_type)
    return provider.iac_type if provider else ""


def supported_policy_types(include_indirect: bool) -> list[str]:
    """Return the sorted names of the registered policy types."""
    return sorted(
        name
        for name, provider in _providers.items()
        if include_indirect or not provider.is_indirect
    )


register_indirect_cloud_provider("all", "terraform", "v12", lambda: supported_policy_types(False))
register_cloud_provider("aws", "terraform", "v12")
register_cloud_provider("azure", "terraform", "v12")
register_cloud_provider("gcp", "terraform", "v12")
register_cloud_provider("github", "terraform", "v12")
register_cloud_provider("k8s", "helm", "3")
register_cloud_provider("k8s", "k8s", "v1")
register_cloud_provider("k8s", "kustomize", "v3")