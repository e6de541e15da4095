"""ASGI entrypoint for the joke board."""

from joke_board.api.app import create_app
from joke_board.containers import build_container

app = create_app(build_container())
