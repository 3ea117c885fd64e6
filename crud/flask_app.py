"""Flask integration.

Mounts one or more `Crud` handlers on a Flask application. The handler keeps
its own sub-routing through the `path` query parameter, so a single URL rule
per entity is enough.
"""

from __future__ import annotations

import logging
import os
from typing import Optional
from urllib.parse import urlsplit

from flask import Flask, request

from crud.server import Crud

logger = logging.getLogger(__name__)

# Prefer generic container vars; CRUD_* take precedence where set.
HOST = os.environ.get("CRUD_HOST", os.environ.get("HOST", "127.0.0.1"))
PORT = int(os.environ.get("CRUD_PORT", os.environ.get("PORT", "8080")))
DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"


def mount_crud(app: Flask, crud: Crud, rule: Optional[str] = None, endpoint: Optional[str] = None) -> str:
    """Register `crud` on `app` and return the URL rule used.

    The rule defaults to the path part of the configured endpoint URL.
    """
    rule = rule or urlsplit(crud.endpoint).path or "/"
    endpoint = endpoint or "crud_" + (rule.strip("/").replace("/", "_") or "root")

    def view():
        return crud.handle(request)

    app.add_url_rule(rule, endpoint=endpoint, view_func=view, methods=["GET", "POST"])
    logger.debug("Mounted %s manager at %s", crud.singular, rule)
    return rule


def create_app(*cruds: Crud) -> Flask:
    flask_app = Flask(__name__, static_folder=None, template_folder=None)

    @flask_app.route("/healthz")
    def healthz():
        return "ok", 200, {"Content-Type": "text/plain"}

    for crud in cruds:
        mount_crud(flask_app, crud)
    return flask_app


def run(flask_app: Flask) -> None:
    # Development server only; use gunicorn or waitress in production.
    flask_app.run(host=HOST, port=PORT, debug=DEBUG, threaded=True)
