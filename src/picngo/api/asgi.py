"""ASGI entrypoint for the PicNGo API."""

from picngo.api.app import create_app
from picngo.containers import build_container

app = create_app(build_container())
