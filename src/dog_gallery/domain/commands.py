"""User actions dispatched to the gallery controller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Start:
    """Initial load of the gallery and the favorites."""


@dataclass(frozen=True)
class Search:
    """Search by breed name; reads the search input when name is None."""

    name: str | None = None


@dataclass(frozen=True)
class ClearFilter:
    """Drop the breed filter and go back to random images."""


@dataclass(frozen=True)
class PageNext:
    pass


@dataclass(frozen=True)
class PagePrevious:
    pass


@dataclass(frozen=True)
class PageGoTo:
    page: int


@dataclass(frozen=True)
class Favorite:
    image_id: str


@dataclass(frozen=True)
class Unfavorite:
    favorite_id: str


@dataclass(frozen=True)
class LoadFavorites:
    pass


Command = (
    Start
    | Search
    | ClearFilter
    | PageNext
    | PagePrevious
    | PageGoTo
    | Favorite
    | Unfavorite
    | LoadFavorites
)
