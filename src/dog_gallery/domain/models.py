"""Domain models for the dog gallery."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Category:
    """A breed as listed by the catalog."""

    id: str
    name: str
    attributes: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ImageRecord:
    """An image from the catalog with its breed metadata."""

    id: str
    url: str
    categories: tuple[Category, ...] = ()

    @property
    def alt_text(self) -> str:
        """Return the first breed name, or a generic label."""
        if self.categories:
            return self.categories[0].name
        return "Dog image"


@dataclass(frozen=True)
class FavoriteEntry:
    """Link between the session owner and a favorited image."""

    favorite_id: str
    owner_token: str
    image: ImageRecord


@dataclass(frozen=True)
class QueryState:
    """Active breed filter and page of the gallery."""

    active_category_id: str = ""
    current_page: int = 0
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.current_page < 0:
            raise ValueError(f"current_page must be >= 0, got {self.current_page}")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")

    def with_page(self, page: int) -> "QueryState":
        """Return a copy pointing at another page."""
        return replace(self, current_page=page)

    def with_category(self, category_id: str) -> "QueryState":
        """Return a copy filtered by a breed, starting at the first page."""
        return replace(self, active_category_id=category_id, current_page=0)
