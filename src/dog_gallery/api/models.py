"""Pydantic models for the gallery HTTP API."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Search box content submitted by the page."""

    name: str = ""


class FavoriteRequest(BaseModel):
    """Image to add to favorites."""

    image_id: str = Field(min_length=1)


class CardModel(BaseModel):
    """One rendered image card."""

    image_id: str
    url: str
    alt: str
    favorite_id: str | None = None
    button_text: str | None = None
    button_class: str | None = None
    button_action: str | None = None


class NoticeModel(BaseModel):
    """A user-facing message."""

    message: str
    level: str


class PagingModel(BaseModel):
    """Enabled state of the paging controls."""

    prev: bool
    next: bool


class QueryModel(BaseModel):
    """Active breed filter and page."""

    active_category_id: str
    current_page: int
    page_size: int


class GalleryView(BaseModel):
    """Snapshot of everything the page displays."""

    containers: dict[str, list[CardModel]]
    loading: dict[str, bool]
    statuses: dict[str, str]
    paging: PagingModel
    notice: NoticeModel | None = None
    notices: list[NoticeModel] = Field(default_factory=list)
    search_input: str = ""
    query: QueryModel


class CategoryModel(BaseModel):
    """Breed metadata attached to an image."""

    id: str
    name: str
    attributes: dict[str, object] = Field(default_factory=dict)


class ImageModel(BaseModel):
    """Single catalog image."""

    id: str
    url: str
    alt: str
    categories: list[CategoryModel] = Field(default_factory=list)
