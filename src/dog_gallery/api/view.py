"""In-memory rendering surface backing the HTTP API."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from dog_gallery.api.models import CardModel, NoticeModel
from dog_gallery.domain.models import FavoriteEntry, ImageRecord
from dog_gallery.domain.views import ActionButton, NoticeLevel, ViewName
from dog_gallery.services.gallery import RenderingSurface

MAX_NOTICES = 20


@dataclass
class InMemorySurface(RenderingSurface):
    """Rendering surface that keeps the rendered page as plain data."""

    containers: dict[ViewName, list[CardModel]] = field(
        default_factory=lambda: {view: [] for view in ViewName}
    )
    loading: dict[ViewName, bool] = field(
        default_factory=lambda: {view: False for view in ViewName}
    )
    notices: list[NoticeModel] = field(default_factory=list)
    paging_prev: bool = False
    paging_next: bool = False
    search_input: str = ""

    @property
    def notice(self) -> NoticeModel | None:
        """Return the message currently on display."""
        return self.notices[-1] if self.notices else None

    def render_list(
        self,
        records: Sequence[ImageRecord] | Sequence[FavoriteEntry],
        container: ViewName,
        action_button: ActionButton | None = None,
    ) -> None:
        self.clear(container)
        if not records:
            self.notify("No images to display.", NoticeLevel.INFO)
            return
        self.containers[container] = [
            _card(record, action_button) for record in records
        ]

    def clear(self, container: ViewName) -> None:
        self.containers[container] = []

    def set_loading(self, container: ViewName, loading: bool) -> None:
        self.loading[container] = loading

    def notify(self, message: str, level: NoticeLevel) -> None:
        self.notices.append(NoticeModel(message=message, level=level.value))
        del self.notices[:-MAX_NOTICES]

    def set_paging_enabled(self, prev: bool, next: bool) -> None:  # noqa: A002
        self.paging_prev = prev
        self.paging_next = next

    def read_search_input(self) -> str:
        return self.search_input.strip()

    def reset_search_input(self) -> None:
        self.search_input = ""


def _card(
    record: ImageRecord | FavoriteEntry, action_button: ActionButton | None
) -> CardModel:
    """Build the card for an image or a favorite."""
    favorite_id = None
    image = record
    if isinstance(record, FavoriteEntry):
        favorite_id = record.favorite_id
        image = record.image
    card = CardModel(
        image_id=image.id,
        url=image.url,
        alt=image.alt_text,
        favorite_id=favorite_id,
    )
    if action_button is not None:
        card.button_text = action_button.text
        card.button_class = action_button.class_name
        card.button_action = action_button.action.value
    return card
