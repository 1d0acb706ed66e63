"""ASGI entrypoint for the label scanning API."""

from calorie_hunter.api.app import create_app
from calorie_hunter.containers import build_container

app = create_app(build_container())
