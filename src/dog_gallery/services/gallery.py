"""Gallery session state: breed filter, paging and favorites."""

import logging
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

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
from dog_gallery.domain.models import FavoriteEntry, ImageRecord, QueryState
from dog_gallery.domain.outcomes import Failure, FailureKind, RequestOutcome, Success
from dog_gallery.domain.views import (
    FAVORITE_BUTTON,
    REMOVE_BUTTON,
    ActionButton,
    NoticeLevel,
    ViewName,
    ViewStatus,
)
from dog_gallery.services.catalog import CatalogService

_logger = logging.getLogger(__name__)

T = TypeVar("T")

GALLERY_LOAD_ERROR = "Failed to load dog images. Please try again later."
FAVORITES_LOAD_ERROR = "Failed to load favorites. Please try again later."


class RenderingSurface(Protocol):
    """View layer the controller renders into."""

    def render_list(
        self,
        records: Sequence[ImageRecord] | Sequence[FavoriteEntry],
        container: ViewName,
        action_button: ActionButton | None = None,
    ) -> None:
        """Replace the container's content with one card per record."""

    def clear(self, container: ViewName) -> None:
        """Remove every card from the container."""

    def set_loading(self, container: ViewName, loading: bool) -> None:
        """Show or hide the container's loading indicator."""

    def notify(self, message: str, level: NoticeLevel) -> None:
        """Show a transient message to the user."""

    def set_paging_enabled(self, prev: bool, next: bool) -> None:  # noqa: A002
        """Enable or disable the paging controls."""

    def read_search_input(self) -> str:
        """Return the current content of the search box."""

    def reset_search_input(self) -> None:
        """Empty the search box."""


@dataclass
class GalleryController:
    """State machine coordinating the catalog and the rendering surface.

    The query state is replaced only after a gallery page loads successfully,
    so a failed request leaves it pointing at the last page actually shown.
    Overlapping loads of one view are sequenced by request token: only the
    response to the most recently issued request is applied.
    """

    catalog: CatalogService
    surface: RenderingSurface
    page_size: int = 10
    query: QueryState = field(init=False)
    statuses: dict[ViewName, ViewStatus] = field(init=False)
    favorites: list[FavoriteEntry] = field(init=False, default_factory=list)
    last_page_full: bool = field(init=False, default=False)
    _tokens: dict[ViewName, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.query = QueryState(page_size=self.page_size)
        self.statuses = {view: ViewStatus.IDLE for view in ViewName}
        self._tokens = {view: 0 for view in ViewName}

    @property
    def can_go_previous(self) -> bool:
        return self.query.current_page > 0

    @property
    def can_go_next(self) -> bool:
        return self.last_page_full

    async def dispatch(self, command: Command) -> None:  # noqa: PLR0911
        """Route a user action to its handler."""
        if isinstance(command, Start):
            await self.start()
            return
        if isinstance(command, Search):
            await self.search(command.name)
            return
        if isinstance(command, ClearFilter):
            await self.clear()
            return
        if isinstance(command, PageNext):
            await self.next_page()
            return
        if isinstance(command, PagePrevious):
            await self.previous_page()
            return
        if isinstance(command, PageGoTo):
            await self.go_to_page(command.page)
            return
        if isinstance(command, Favorite):
            await self.favorite(command.image_id)
            return
        if isinstance(command, Unfavorite):
            await self.unfavorite(command.favorite_id)
            return
        if isinstance(command, LoadFavorites):
            await self.load_favorites()
            return
        raise TypeError(f"Unsupported command: {command!r}")

    async def start(self) -> None:
        """Load random images and the saved favorites."""
        await self.load_gallery("", 0)
        await self.load_favorites()

    async def search(self, name: str | None = None) -> None:
        """Filter the gallery by the first breed whose name matches."""
        term = (name if name is not None else self.surface.read_search_input()).strip()
        if not term:
            self.surface.notify("Please enter a breed name to search.", NoticeLevel.INFO)
            return

        outcome = await self._call(self.catalog.find_category(term), "find_category")
        if isinstance(outcome, Failure):
            if outcome.kind is FailureKind.NOT_FOUND:
                _logger.info("No breed matches %r, showing random images", term)
                self.surface.notify(
                    f"{outcome.message} Showing random dogs instead.",
                    NoticeLevel.INFO,
                )
                await self.load_gallery("", 0)
                return
            self.surface.notify(
                f"Failed to look up breeds: {outcome.message}", NoticeLevel.ERROR
            )
            return

        category = outcome.data
        if await self.load_gallery(category.id, 0):
            self.surface.notify(
                f"Showing images for {category.name}.", NoticeLevel.SUCCESS
            )

    async def clear(self) -> None:
        """Drop the breed filter and reload random images."""
        self.surface.reset_search_input()
        if await self.load_gallery("", 0):
            self.surface.notify("Search cleared.", NoticeLevel.INFO)

    async def next_page(self) -> None:
        if not self.can_go_next:
            self.surface.notify("No more images to show.", NoticeLevel.INFO)
            return
        await self.load_gallery(
            self.query.active_category_id, self.query.current_page + 1
        )

    async def previous_page(self) -> None:
        if not self.can_go_previous:
            self.surface.notify("Already on the first page.", NoticeLevel.INFO)
            return
        await self.load_gallery(
            self.query.active_category_id, self.query.current_page - 1
        )

    async def go_to_page(self, page: int) -> None:
        if page < 0:
            self.surface.notify(
                f"Page must be zero or greater, got {page}.", NoticeLevel.ERROR
            )
            return
        await self.load_gallery(self.query.active_category_id, page)

    async def favorite(self, image_id: str) -> None:
        """Favorite an image, then reload favorites from the catalog."""
        outcome = await self._call(self.catalog.add_favorite(image_id), "add_favorite")
        if isinstance(outcome, Failure):
            self.surface.notify(
                f"Failed to add favorite: {outcome.message}", NoticeLevel.ERROR
            )
            return
        self.surface.notify("Added to favorites!", NoticeLevel.SUCCESS)
        await self.load_favorites()

    async def unfavorite(self, favorite_id: str) -> None:
        """Remove a favorite by its favorite id, then reload favorites."""
        if not any(entry.favorite_id == favorite_id for entry in self.favorites):
            self.surface.notify(
                f'Unknown favorite id "{favorite_id}". Reload favorites and try again.',
                NoticeLevel.ERROR,
            )
            return
        outcome = await self._call(
            self.catalog.remove_favorite(favorite_id), "remove_favorite"
        )
        if isinstance(outcome, Failure):
            self.surface.notify(
                f"Failed to remove favorite: {outcome.message}", NoticeLevel.ERROR
            )
            return
        self.surface.notify("Removed from favorites.", NoticeLevel.SUCCESS)
        await self.load_favorites()

    async def load_gallery(self, category_id: str, page: int) -> bool:
        """Load one gallery page; return True when it was applied."""
        token = self._begin(ViewName.GALLERY)
        self.surface.set_paging_enabled(False, False)
        outcome: RequestOutcome[list[ImageRecord]] = Failure(
            FailureKind.TRANSPORT_ERROR, "Request did not complete"
        )
        try:
            outcome = await self._call(
                self.catalog.search_images(
                    category_id=category_id, limit=self.query.page_size, page=page
                ),
                "search_images",
            )
        finally:
            applied = self._finish(ViewName.GALLERY, token, outcome)
        if not applied:
            return False

        if isinstance(outcome, Failure):
            _logger.warning("Gallery load failed: %s", outcome.message)
            self.surface.clear(ViewName.GALLERY)
            self.surface.notify(GALLERY_LOAD_ERROR, NoticeLevel.ERROR)
        else:
            images = outcome.data
            self.query = self.query.with_category(category_id).with_page(page)
            self.last_page_full = len(images) == self.query.page_size
            self.surface.render_list(images, ViewName.GALLERY, FAVORITE_BUTTON)
        self.surface.set_paging_enabled(self.can_go_previous, self.can_go_next)
        return isinstance(outcome, Success)

    async def load_favorites(self) -> bool:
        """Reload the favorites view; return True when it was applied."""
        token = self._begin(ViewName.FAVORITES)
        outcome: RequestOutcome[list[FavoriteEntry]] = Failure(
            FailureKind.TRANSPORT_ERROR, "Request did not complete"
        )
        try:
            outcome = await self._call(self.catalog.list_favorites(), "list_favorites")
        finally:
            applied = self._finish(ViewName.FAVORITES, token, outcome)
        if not applied:
            return False

        if isinstance(outcome, Failure):
            _logger.warning("Favorites load failed: %s", outcome.message)
            self.surface.clear(ViewName.FAVORITES)
            self.surface.notify(FAVORITES_LOAD_ERROR, NoticeLevel.ERROR)
            return False
        self.favorites = list(outcome.data)
        self.surface.render_list(self.favorites, ViewName.FAVORITES, REMOVE_BUTTON)
        return True

    def _begin(self, view: ViewName) -> int:
        """Issue a request token and move the view into loading."""
        self._tokens[view] += 1
        self.statuses[view] = ViewStatus.LOADING
        self.surface.set_loading(view, True)
        return self._tokens[view]

    def _finish(
        self, view: ViewName, token: int, outcome: RequestOutcome[object]
    ) -> bool:
        """Settle the view's status unless a newer request superseded this one."""
        if token != self._tokens[view]:
            _logger.info("Dropping stale %s response (token %s)", view, token)
            return False
        self.statuses[view] = (
            ViewStatus.LOADED if isinstance(outcome, Success) else ViewStatus.ERRORED
        )
        self.surface.set_loading(view, False)
        return True

    async def _call(
        self, request: Awaitable[RequestOutcome[T]], action: str
    ) -> RequestOutcome[T]:
        """Await a catalog request, turning unexpected errors into failures."""
        try:
            return await request
        except Exception as exc:
            _logger.exception("Catalog %s raised", action)
            return Failure(FailureKind.TRANSPORT_ERROR, f"{type(exc).__name__}: {exc}")
