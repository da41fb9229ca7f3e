"""Production container wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from civic.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every component's production implementation.

    ``FastapiProvider`` makes the current ``Request`` resolvable inside
    request scope.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``; routes resolve ``FromDishka`` through it."""
    setup_dishka(container, app)
