"""Shared test fixtures."""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx
import pytest

from dog_gallery.adapters.dog_api_transport import HttpxDogApiTransport
from dog_gallery.api.view import InMemorySurface
from dog_gallery.config import Settings
from dog_gallery.containers import AppContainer
from dog_gallery.domain.models import FavoriteEntry, ImageRecord
from dog_gallery.domain.views import ActionButton, NoticeLevel, ViewName
from dog_gallery.services.catalog import CatalogService
from dog_gallery.services.gallery import GalleryController, RenderingSurface

BASE_URL = "https://api.test/v1"
OWNER_TOKEN = "user_id_12345"

BREEDS: list[dict[str, object]] = [
    {"id": 1, "name": "Affenpinscher", "temperament": "Stubborn, Curious"},
    {"id": 149, "name": "Labrador Retriever", "life_span": "10 - 13 years"},
    {"id": 201, "name": "Siberian Husky", "breed_group": "Working"},
]


def _image_payload(index: int, breed: dict[str, object] | None) -> dict[str, object]:
    return {
        "id": f"img{index}",
        "url": f"https://cdn.test/img{index}.jpg",
        "width": 500,
        "height": 400,
        "breeds": [breed] if breed else [],
    }


@dataclass
class FakeDogApi:
    """In-memory stand-in for The Dog API, served through httpx.MockTransport."""

    breeds: list[dict[str, object]] = field(default_factory=lambda: list(BREEDS))
    images_per_breed: int = 25
    favourites: dict[int, dict[str, object]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    fail_paths: set[str] = field(default_factory=set)
    next_favourite_id: int = 1000

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1")
        if path in self.fail_paths:
            raise httpx.ConnectError("connection refused", request=request)
        if request.headers.get("x-api-key") != "test-key":
            return httpx.Response(401, json={"message": "AUTHENTICATION_ERROR"})
        if path == "/breeds":
            return httpx.Response(200, json=self.breeds)
        if path == "/images/search":
            return httpx.Response(200, json=self._search(request))
        if path.startswith("/images/"):
            return self._image(path.removeprefix("/images/"))
        if path == "/favourites" and request.method == "POST":
            return self._add_favourite(json.loads(request.content.decode()))
        if path == "/favourites":
            sub_id = request.url.params.get("sub_id")
            return httpx.Response(
                200,
                json=[
                    item
                    for item in self.favourites.values()
                    if item["sub_id"] == sub_id
                ],
            )
        if path.startswith("/favourites/") and request.method == "DELETE":
            favourite_id = int(path.removeprefix("/favourites/"))
            if self.favourites.pop(favourite_id, None) is None:
                return httpx.Response(404, json={"message": "NO_SUCH_FAVOURITE"})
            return httpx.Response(200, text="")
        return httpx.Response(404, text="Not Found")

    @property
    def search_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/images/search")]

    def _search(self, request: httpx.Request) -> list[dict[str, object]]:
        params = request.url.params
        limit = int(params["limit"])
        page = int(params["page"])
        breed_id = params.get("breed_id")
        if breed_id is not None:
            breed = next(b for b in self.breeds if str(b["id"]) == breed_id)
            pool = [
                _image_payload(index, breed) for index in range(self.images_per_breed)
            ]
        else:
            pool = [
                _image_payload(index, self.breeds[index % len(self.breeds)])
                for index in range(self.images_per_breed)
            ]
        return pool[page * limit : (page + 1) * limit]

    def _image(self, image_id: str) -> httpx.Response:
        if not image_id.startswith("img"):
            return httpx.Response(404, json={"message": "NOT_FOUND"})
        payload = _image_payload(int(image_id[3:]), self.breeds[0])
        return httpx.Response(200, json=payload)

    def _add_favourite(self, body: dict[str, object]) -> httpx.Response:
        if not str(body.get("image_id", "")).startswith("img"):
            return httpx.Response(400, json={"message": "INVALID_IMAGE"})
        favourite_id = self.next_favourite_id
        self.next_favourite_id += 1
        self.favourites[favourite_id] = {
            "id": favourite_id,
            "user_id": "abc",
            "image_id": body["image_id"],
            "sub_id": body["sub_id"],
            "created_at": "2026-10-19T10:00:00.000Z",
            "image": {
                "id": body["image_id"],
                "url": f"https://cdn.test/{body['image_id']}.jpg",
            },
        }
        return httpx.Response(200, json={"message": "SUCCESS", "id": favourite_id})


@dataclass
class RecordingSurface(RenderingSurface):
    """Rendering surface that records every call."""

    rendered: dict[ViewName, list[ImageRecord] | list[FavoriteEntry]] = field(
        default_factory=lambda: {view: [] for view in ViewName}
    )
    buttons: dict[ViewName, ActionButton | None] = field(default_factory=dict)
    loading_calls: list[tuple[ViewName, bool]] = field(default_factory=list)
    notices: list[tuple[str, NoticeLevel]] = field(default_factory=list)
    paging: list[tuple[bool, bool]] = field(default_factory=list)
    search_input: str = ""
    input_resets: int = 0

    def render_list(
        self,
        records: Sequence[ImageRecord] | Sequence[FavoriteEntry],
        container: ViewName,
        action_button: ActionButton | None = None,
    ) -> None:
        self.rendered[container] = list(records)
        self.buttons[container] = action_button

    def clear(self, container: ViewName) -> None:
        self.rendered[container] = []

    def set_loading(self, container: ViewName, loading: bool) -> None:
        self.loading_calls.append((container, loading))

    def notify(self, message: str, level: NoticeLevel) -> None:
        self.notices.append((message, level))

    def set_paging_enabled(self, prev: bool, next: bool) -> None:  # noqa: A002
        self.paging.append((prev, next))

    def read_search_input(self) -> str:
        return self.search_input

    def reset_search_input(self) -> None:
        self.search_input = ""
        self.input_resets += 1

    def levels(self) -> list[NoticeLevel]:
        return [level for _, level in self.notices]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        dog_api_key="test-key",
        dog_api_base_url=BASE_URL,
        dog_api_sub_id=OWNER_TOKEN,
        page_size=10,
        environment="test",
    )


@pytest.fixture
def fake_api() -> FakeDogApi:
    return FakeDogApi()


@pytest.fixture
def catalog(fake_api: FakeDogApi) -> CatalogService:
    return build_catalog(fake_api)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def controller(catalog: CatalogService, surface: RecordingSurface) -> GalleryController:
    return GalleryController(catalog=catalog, surface=surface, page_size=10)


@pytest.fixture
def container(settings: Settings, fake_api: FakeDogApi) -> AppContainer:
    catalog_service = build_catalog(fake_api)
    surface = InMemorySurface()
    gallery_controller = GalleryController(
        catalog=catalog_service,
        surface=surface,
        page_size=settings.page_size,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        transport=catalog_service.transport,
        catalog_service=catalog_service,
        surface=surface,
        gallery_controller=gallery_controller,
        close_resources=close_resources,
    )


def build_transport(
    fake_api: FakeDogApi, api_key: str = "test-key"
) -> HttpxDogApiTransport:
    return HttpxDogApiTransport(
        api_key=api_key,
        base_url=BASE_URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)),
    )


def build_catalog(fake_api: FakeDogApi) -> CatalogService:
    return CatalogService(transport=build_transport(fake_api), owner_token=OWNER_TOKEN)
