"""Catalog operations on top of The Dog API transport."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from dog_gallery.adapters.dog_api_transport import DogApiTransport
from dog_gallery.domain.models import Category, FavoriteEntry, ImageRecord
from dog_gallery.domain.outcomes import Failure, FailureKind, RequestOutcome, Success

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CatalogService:
    """Typed breed, image and favorite operations for one owner token."""

    transport: DogApiTransport
    owner_token: str
    debug: bool = False

    async def list_categories(self) -> RequestOutcome[list[Category]]:
        """List all breeds."""
        outcome = await self.transport.send("/breeds")
        return _parse(outcome, "breeds", lambda payload: _parse_list(payload, _category))

    async def find_category(self, name: str) -> RequestOutcome[Category]:
        """Return the first breed whose name contains the term, ignoring case."""
        outcome = await self.list_categories()
        if isinstance(outcome, Failure):
            return outcome
        term = name.strip().lower()
        for category in outcome.data:
            if term in category.name.lower():
                return Success(category)
        return Failure(FailureKind.NOT_FOUND, f'No breed found matching "{name}".')

    async def search_images(
        self, category_id: str = "", limit: int = 10, page: int = 0
    ) -> RequestOutcome[list[ImageRecord]]:
        """Search a randomized page of images, optionally for one breed."""
        params: dict[str, object] = {"limit": limit, "page": page, "order": "Rand"}
        if category_id:
            params["breed_id"] = category_id
        else:
            # Unfiltered pages only include images that carry breed data.
            params["has_breeds"] = 1
        outcome = await self.transport.send("/images/search", params=params)
        result = _parse(outcome, "images", lambda payload: _parse_list(payload, _image))
        if self.debug and isinstance(result, Success):
            _logger.info(
                "Catalog search: breed_id=%s page=%s results=%s",
                category_id or "-",
                page,
                len(result.data),
            )
        return result

    async def get_image_by_id(self, image_id: str) -> RequestOutcome[ImageRecord]:
        """Fetch one image."""
        outcome = await self.transport.send(f"/images/{image_id}")
        return _parse(outcome, "image", _image)

    async def add_favorite(self, image_id: str) -> RequestOutcome[FavoriteEntry]:
        """Favorite an image for the owner token."""
        outcome = await self.transport.send(
            "/favourites",
            method="POST",
            json={"image_id": image_id, "sub_id": self.owner_token},
        )
        return _parse(
            outcome,
            "favourite",
            lambda payload: FavoriteEntry(
                favorite_id=str(payload["id"]),
                owner_token=self.owner_token,
                image=ImageRecord(id=image_id, url=""),
            ),
        )

    async def list_favorites(self) -> RequestOutcome[list[FavoriteEntry]]:
        """List the owner token's favorites."""
        outcome = await self.transport.send(
            "/favourites", params={"sub_id": self.owner_token}
        )
        return _parse(
            outcome,
            "favourites",
            lambda payload: _parse_list(payload, self._favorite),
        )

    async def remove_favorite(self, favorite_id: str) -> RequestOutcome[None]:
        """Delete a favorite by its favorite id."""
        outcome = await self.transport.send(f"/favourites/{favorite_id}", method="DELETE")
        if isinstance(outcome, Failure):
            return outcome
        return Success(None)

    def _favorite(self, payload: dict[str, object]) -> FavoriteEntry:
        image_payload = payload.get("image") or {}
        image = ImageRecord(
            id=str(payload.get("image_id") or image_payload.get("id", "")),
            url=str(image_payload.get("url", "")),
        )
        return FavoriteEntry(
            favorite_id=str(payload["id"]),
            owner_token=str(payload.get("sub_id") or self.owner_token),
            image=image,
        )


def _parse(
    outcome: RequestOutcome[object], label: str, parser: Callable[[object], T]
) -> RequestOutcome[T]:
    """Convert a raw payload outcome into a typed one."""
    if isinstance(outcome, Failure):
        return outcome
    try:
        return Success(parser(outcome.data))
    except (KeyError, TypeError, AttributeError) as exc:
        _logger.warning("Unexpected %s payload: %r", label, exc)
        return Failure(
            FailureKind.TRANSPORT_ERROR,
            f"Unexpected {label} payload from API: {exc!r}",
        )


def _parse_list(payload: object, parser: Callable[[dict[str, object]], T]) -> list[T]:
    if not isinstance(payload, list):
        raise TypeError(f"expected a list, got {type(payload).__name__}")
    return [parser(item) for item in payload]


def _category(payload: dict[str, object]) -> Category:
    attributes = {
        key: value for key, value in payload.items() if key not in {"id", "name"}
    }
    return Category(
        id=str(payload["id"]),
        name=str(payload["name"]),
        attributes=attributes,
    )


def _image(payload: dict[str, object]) -> ImageRecord:
    breeds = payload.get("breeds") or []
    return ImageRecord(
        id=str(payload["id"]),
        url=str(payload["url"]),
        categories=tuple(_category(breed) for breed in breeds),
    )
