"""Dependency injection module."""

from typing import Type

from civic.util.di.application import ProdApplicationProvider
from civic.util.di.base import Component, ProviderBase
from civic.util.di.core import ProdConfigProvider
from civic.util.di.domain import ProdDomainProvider
from civic.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from civic.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: concrete provider, use directly
    - Has subclasses: mockable component, select by ``__is_mock__`` flag

    Raises:
        DependencyInjectionError: If the requested implementation is missing
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if c.__is_mock__ == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(base.mockable_component() or base.__name__, kind)

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
