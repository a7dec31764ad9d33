"""Dependency injection module."""

from typing import Type

from dishka import AsyncContainer, make_async_container

from remarks.util.di.application import ProdApplicationProvider
from remarks.util.di.base import Component, ProviderBase
from remarks.util.di.core import ProdConfigProvider
from remarks.util.di.domain import ProdDomainProvider
from remarks.util.di.infrastructure import (
    ClockProvider,
    GateStateProvider,
    ProdClockProvider,
    ProdGateStateProvider,
    ProdStoreProvider,
    StoreProvider,
)
from remarks.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    StoreProvider,
    GateStateProvider,
    ClockProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(f"No {kind} implementation for {component_name}")

    return impl


def build_container() -> AsyncContainer:
    """Build the production container."""
    return make_async_container(*(get_provider(base)() for base in PROVIDERS))


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_container",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ClockProvider",
    "GateStateProvider",
    "StoreProvider",
    # Infrastructure implementations
    "ProdClockProvider",
    "ProdGateStateProvider",
    "ProdStoreProvider",
]
