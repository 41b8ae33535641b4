"""ASGI entrypoint for the photos API."""

from photos_api.api.app import create_app
from photos_api.containers import build_container

app = create_app(build_container())
