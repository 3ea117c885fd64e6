"""CRUD handler.

A single WSGI-compatible handler serves every screen for one entity type. The
screen is picked from the `path` request parameter, so the handler can be
mounted at any base URL of the embedding application.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlencode

from werkzeug.wrappers import Request, Response

from crud.config import Config, validate_config
from crud.controllers import (
    EntityCreateController,
    EntityManagerController,
    EntityReadController,
    EntityTrashController,
    EntityUpdateController,
)
from crud.responses import html_response

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Response]


class Route(str, Enum):
    HOME = "home"
    ENTITY_MANAGER = "entity-manager"
    ENTITY_CREATE_MODAL = "entity-create-modal"
    ENTITY_CREATE_AJAX = "entity-create-ajax"
    ENTITY_READ = "entity-read"
    ENTITY_UPDATE = "entity-update"
    ENTITY_UPDATE_AJAX = "entity-update-ajax"
    ENTITY_TRASH_AJAX = "entity-trash-ajax"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Route":
        try:
            return cls((value or "").strip() or cls.HOME.value)
        except ValueError:
            return cls.HOME


class Crud:
    """Admin screens for one entity type, driven by a validated `Config`."""

    def __init__(self, config: Config):
        self.capabilities = validate_config(config)
        self.config = config
        self.manager = EntityManagerController(self)
        self.creator = EntityCreateController(self)
        self.reader = EntityReadController(self)
        self.updater = EntityUpdateController(self)
        self.trasher = EntityTrashController(self)

    # Shorthands used by the controllers.
    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def singular(self) -> str:
        return self.config.entity_name_singular

    @property
    def plural(self) -> str:
        return self.config.entity_name_plural

    def handler_for(self, path: Optional[str]) -> Handler:
        route = Route.parse(path)
        if route == Route.ENTITY_CREATE_MODAL:
            return self.creator.modal_show
        if route == Route.ENTITY_CREATE_AJAX:
            return self.creator.modal_save
        if route == Route.ENTITY_READ:
            return self.reader.page
        if route == Route.ENTITY_UPDATE:
            return self.updater.page
        if route == Route.ENTITY_UPDATE_AJAX:
            return self.updater.page_save
        if route == Route.ENTITY_TRASH_AJAX:
            return self.trasher.trash_ajax
        return self.manager.page

    def handle(self, request: Request) -> Response:
        handler = self.handler_for(request.values.get("path", ""))
        try:
            return handler(request)
        except Exception:
            logger.exception("Unhandled error in %s handler", self.singular)
            return html_response(
                "<h1>500 Internal Server Error</h1><p>An unexpected server error occurred.</p>",
                status=500,
            )

    def __call__(self, environ, start_response):
        response = self.handle(Request(environ))
        return response(environ, start_response)

    def _url(self, route: Route, **params: str) -> str:
        joiner = "&" if "?" in self.endpoint else "?"
        query = urlencode({"path": route.value, **params})
        return f"{self.endpoint}{joiner}{query}"

    def url_home(self) -> str:
        return self.config.home_url

    def url_entity_manager(self) -> str:
        return self._url(Route.ENTITY_MANAGER)

    def url_entity_create_modal(self) -> str:
        return self._url(Route.ENTITY_CREATE_MODAL)

    def url_entity_create_ajax(self) -> str:
        return self._url(Route.ENTITY_CREATE_AJAX)

    def url_entity_read(self, entity_id: Optional[str] = None) -> str:
        if entity_id is None:
            return self._url(Route.ENTITY_READ)
        return self._url(Route.ENTITY_READ, entity_id=entity_id)

    def url_entity_update(self, entity_id: Optional[str] = None) -> str:
        if entity_id is None:
            return self._url(Route.ENTITY_UPDATE)
        return self._url(Route.ENTITY_UPDATE, entity_id=entity_id)

    def url_entity_update_ajax(self) -> str:
        return self._url(Route.ENTITY_UPDATE_AJAX)

    def url_entity_trash_ajax(self) -> str:
        return self._url(Route.ENTITY_TRASH_AJAX)


def new_crud(config: Config) -> Crud:
    return Crud(config)
