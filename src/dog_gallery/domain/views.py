"""View identifiers and states shared by the controller and the surface."""

from dataclasses import dataclass
from enum import StrEnum


class ViewName(StrEnum):
    """Containers the gallery renders into."""

    GALLERY = "gallery"
    FAVORITES = "favorites"


class ViewStatus(StrEnum):
    """Load lifecycle of a single view."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class NoticeLevel(StrEnum):
    """Severity of a user-facing notice."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class ButtonAction(StrEnum):
    """What an image card's button does when pressed."""

    FAVORITE = "favorite"
    UNFAVORITE = "unfavorite"


@dataclass(frozen=True)
class ActionButton:
    """Button attached to every card of a rendered list."""

    text: str
    class_name: str
    action: ButtonAction


FAVORITE_BUTTON = ActionButton("Favorite", "favorite-btn", ButtonAction.FAVORITE)
REMOVE_BUTTON = ActionButton("Remove", "remove-favorite-btn", ButtonAction.UNFAVORITE)
