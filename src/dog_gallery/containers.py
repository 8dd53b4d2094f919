"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dog_gallery.adapters.dog_api_transport import (
    DogApiTransport,
    HttpxDogApiTransport,
)
from dog_gallery.api.view import InMemorySurface
from dog_gallery.config import Settings
from dog_gallery.services.catalog import CatalogService
from dog_gallery.services.gallery import GalleryController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    transport: DogApiTransport
    catalog_service: CatalogService
    surface: InMemorySurface
    gallery_controller: GalleryController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    transport = HttpxDogApiTransport.create(
        api_key=resolved_settings.dog_api_key,
        base_url=resolved_settings.dog_api_base_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    catalog_service = CatalogService(
        transport=transport,
        owner_token=resolved_settings.dog_api_sub_id,
        debug=resolved_settings.debug,
    )
    surface = InMemorySurface()
    gallery_controller = GalleryController(
        catalog=catalog_service,
        surface=surface,
        page_size=resolved_settings.page_size,
    )

    async def close_resources() -> None:
        await transport.close()

    return AppContainer(
        settings=resolved_settings,
        transport=transport,
        catalog_service=catalog_service,
        surface=surface,
        gallery_controller=gallery_controller,
        close_resources=close_resources,
    )
