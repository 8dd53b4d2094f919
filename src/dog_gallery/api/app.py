"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from dog_gallery.api.models import (
    CategoryModel,
    FavoriteRequest,
    GalleryView,
    ImageModel,
    PagingModel,
    QueryModel,
    SearchRequest,
)
from dog_gallery.api.page import GALLERY_PAGE_HTML
from dog_gallery.app_logging import configure_logging
from dog_gallery.containers import AppContainer
from dog_gallery.domain.commands import (
    ClearFilter,
    Command,
    Favorite,
    LoadFavorites,
    PageGoTo,
    PageNext,
    PagePrevious,
    Search,
    Start,
    Unfavorite,
)
from dog_gallery.domain.models import ImageRecord
from dog_gallery.domain.outcomes import Failure


def create_app(container: AppContainer, *, load_on_startup: bool = True) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if load_on_startup:
            try:
                await app.state.container.gallery_controller.dispatch(Start())
            except Exception:
                logger.exception("Initial gallery load failed")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    async def run(request: Request, command: Command) -> GalleryView:
        state_container: AppContainer = request.app.state.container
        await state_container.gallery_controller.dispatch(command)
        return _snapshot(state_container)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def gallery_page() -> HTMLResponse:
        """Minimal gallery page that consumes the JSON API."""
        return HTMLResponse(GALLERY_PAGE_HTML)

    @app.get("/api/view")
    async def view(request: Request) -> GalleryView:
        """Return what the page currently displays."""
        return _snapshot(request.app.state.container)

    @app.post("/api/search")
    async def search(body: SearchRequest, request: Request) -> GalleryView:
        """Filter the gallery by breed name."""
        state_container: AppContainer = request.app.state.container
        state_container.surface.search_input = body.name
        return await run(request, Search())

    @app.post("/api/clear")
    async def clear(request: Request) -> GalleryView:
        return await run(request, ClearFilter())

    @app.post("/api/page/next")
    async def next_page(request: Request) -> GalleryView:
        return await run(request, PageNext())

    @app.post("/api/page/previous")
    async def previous_page(request: Request) -> GalleryView:
        return await run(request, PagePrevious())

    @app.post("/api/page/{page}")
    async def go_to_page(page: int, request: Request) -> GalleryView:
        return await run(request, PageGoTo(page))

    @app.get("/api/favorites")
    async def favorites(request: Request) -> GalleryView:
        """Reload the favorites view."""
        return await run(request, LoadFavorites())

    @app.post("/api/favorites")
    async def add_favorite(body: FavoriteRequest, request: Request) -> GalleryView:
        return await run(request, Favorite(body.image_id))

    @app.delete("/api/favorites/{favorite_id}")
    async def remove_favorite(favorite_id: str, request: Request) -> GalleryView:
        return await run(request, Unfavorite(favorite_id))

    @app.get("/api/images/{image_id}")
    async def image_detail(image_id: str, request: Request) -> ImageModel:
        """Return a single image from the catalog."""
        state_container: AppContainer = request.app.state.container
        outcome = await state_container.catalog_service.get_image_by_id(image_id)
        if isinstance(outcome, Failure):
            code = (
                status.HTTP_404_NOT_FOUND
                if outcome.status_code == status.HTTP_404_NOT_FOUND
                else status.HTTP_502_BAD_GATEWAY
            )
            raise HTTPException(status_code=code, detail=outcome.message)
        return _image_model(outcome.data)

    return app


def _snapshot(state_container: AppContainer) -> GalleryView:
    """Build the view payload from the surface and controller state."""
    surface = state_container.surface
    controller = state_container.gallery_controller
    return GalleryView(
        containers={
            view.value: list(cards) for view, cards in surface.containers.items()
        },
        loading={view.value: flag for view, flag in surface.loading.items()},
        statuses={
            view.value: view_status.value
            for view, view_status in controller.statuses.items()
        },
        paging=PagingModel(prev=surface.paging_prev, next=surface.paging_next),
        notice=surface.notice,
        notices=list(surface.notices),
        search_input=surface.search_input,
        query=QueryModel(
            active_category_id=controller.query.active_category_id,
            current_page=controller.query.current_page,
            page_size=controller.query.page_size,
        ),
    )


def _image_model(image: ImageRecord) -> ImageModel:
    return ImageModel(
        id=image.id,
        url=image.url,
        alt=image.alt_text,
        categories=[
            CategoryModel(
                id=category.id,
                name=category.name,
                attributes=dict(category.attributes),
            )
            for category in image.categories
        ],
    )
