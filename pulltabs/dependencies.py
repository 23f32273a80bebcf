"""FastAPI dependencies resolving per-app components."""

from fastapi import Request

from pulltabs.config import NotifierConfig
from pulltabs.services.slack.client import Dispatcher


def get_config(request: Request) -> NotifierConfig:
    return request.app.state.config


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher
