"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from joinlink.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are read from the environment the first time a component
    needs them, so building the container does no I/O.

    Returns:
        Container with the production store, webhook notifier and probe
    """
    provider_classes = [get_provider(base, use_mock=False) for base in PROVIDERS]
    logfire.info(
        "Building DI container",
        providers=[cls.__name__ for cls in provider_classes],
    )
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(
        *(cls() for cls in provider_classes), FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute handlers can resolve.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
