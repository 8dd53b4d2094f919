"""ASGI entrypoint for the dog gallery API."""

from dog_gallery.api.app import create_app
from dog_gallery.containers import build_container

app = create_app(build_container())
