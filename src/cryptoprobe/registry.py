"""Cryptographic provider lookup for cryptoprobe.

Providers are identified by dotted module path and resolved through the
interpreter's import system. Resolution locates the module without
executing it, so a provider with heavy native bindings is not loaded.
Providers that register their modules in ``sys.modules`` while a parent
package is imported carry no module spec; those count as resolved once
registered.
"""

from __future__ import annotations

import importlib.util
import sys
from typing import Protocol

from .errors import ProviderNotFoundError


class ProviderRegistry(Protocol):
    """Read-only view of the cryptographic providers available to the host."""

    def resolve(self, name: str) -> None:
        """Resolve a provider by identifier.

        Raises:
            ProviderNotFoundError: If the provider cannot be resolved.
        """
        ...


class ModuleProviderRegistry:
    """Provider registry backed by the import system."""

    def resolve(self, name: str) -> None:
        """Resolve a provider module without importing it.

        Parent packages of a dotted name are imported as part of the lookup;
        the provider module itself is not. A module already present in
        ``sys.modules`` resolves even when it has no spec.

        Args:
            name: Dotted module path of the provider.

        Raises:
            ProviderNotFoundError: If the module cannot be located, or a
                parent package fails while being imported.
        """
        try:
            spec = importlib.util.find_spec(name)
        except ValueError as e:
            # Registered without a spec (__spec__ is None)
            if name in sys.modules:
                return
            raise ProviderNotFoundError(name, str(e)) from e
        except Exception as e:
            raise ProviderNotFoundError(name, str(e)) from e

        if spec is None and name not in sys.modules:
            raise ProviderNotFoundError(name, f"No module named {name!r}")


def is_provider_resolvable(name: str, registry: ProviderRegistry | None = None) -> bool:
    """Resolve a provider without raising exceptions.

    Args:
        name: Provider identifier.
        registry: Registry to query. Defaults to the import system.

    Returns:
        True if the provider resolves, False otherwise.
    """
    try:
        if registry is None:
            registry = ModuleProviderRegistry()
        registry.resolve(name)
        return True
    except ProviderNotFoundError:
        return False
