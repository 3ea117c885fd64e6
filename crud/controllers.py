"""Page controllers for the manager, create, read, update and trash screens.

Page renders (manager, read) never fail the request: a callback error turns
into an inline alert on an otherwise normal page. Actions answer with an
error payload instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from werkzeug.wrappers import Request, Response

from crud.fields import Breadcrumb, FormField, Row
from crud.form import render_form
from crud.layout import DATATABLES_CSS, DATATABLES_JS, render_layout
from crud.markup import cell_html, h, icon, is_raw, render_breadcrumbs, script_json
from crud.responses import api_error, api_success, html_response
from crud.scripts import MANAGER_JS, UPDATE_JS, page_script, vue_mount, widget_assets

if TYPE_CHECKING:
    from crud.server import Crud

logger = logging.getLogger(__name__)

RETRY_LATER_ALERT = (
    "<div class='alert alert-danger'>There was an error retrieving the data. Please try again later</div>"
)


def error_text(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def posted_value(request: Request, name: str) -> Optional[str]:
    # POSTs read the body only; their query string carries the route's `path`.
    if request.method == "POST":
        return request.form.get(name)
    return request.args.get(name)


def request_entity_id(request: Request) -> str:
    return (posted_value(request, "entity_id") or "").strip()


def collect_posted(request: Request, fields: Sequence[FormField]) -> Tuple[Dict[str, str], Optional[str]]:
    """Read one posted value per named field and check required ones.

    Returns the data and the first validation message (None when valid).
    Fields are checked in declaration order and the first miss wins.
    """
    data = {f.name: posted_value(request, f.name) or "" for f in fields if f.name}
    for f in fields:
        if not f.required or not f.name:
            continue
        value = posted_value(request, f.name)
        if value is None or value == "":
            return data, f"{f.display_label} is required field"
    return data, None


class EntityManagerController:
    def __init__(self, crud: "Crud"):
        self.crud = crud

    def _table(self, rows: Sequence[Row]) -> str:
        crud = self.crud
        caps = crud.capabilities
        columns = list(crud.config.column_names)
        head = "".join([f"<th>{cell_html(name)}</th>" for name in columns])

        body_rows: List[str] = []
        for row in rows:
            cells = []
            for index, cell in enumerate(row.data):
                column_raw = index < len(columns) and is_raw(columns[index])
                cells.append(f"<td v-pre>{cell_html(cell, force_raw=column_raw)}</td>")

            actions = []
            if caps.can_read:
                actions.append(
                    f"<a class='btn btn-sm btn-outline-info' title='Show' style='margin-right:5px'"
                    f" href='{h(crud.url_entity_read(row.id))}'>{icon('bi-eye', '')}</a>"
                )
            if caps.can_update:
                actions.append(
                    f"<a class='btn btn-sm btn-outline-warning' title='Edit' style='margin-right:5px'"
                    f" href='{h(crud.url_entity_update(row.id))}'>{icon('bi-pencil-square', '')}</a>"
                )
            if caps.can_trash:
                click = f"showEntityTrashModal({script_json(row.id)})"
                actions.append(
                    f"<button type='button' class='btn btn-sm btn-outline-danger' title='Trash'"
                    f" v-on:click='{h(click)}'>{icon('bi-trash', '')}</button>"
                )
            body_rows.append(f"<tr>{''.join(cells)}<td style='white-space:nowrap;'>{''.join(actions)}</td></tr>")

        return f"""
        <table id='TableEntities' class='table table-responsive table-striped mt-3'>
          <thead><tr>{head}<th style='width:120px;'>Actions</th></tr></thead>
          <tbody>{''.join(body_rows)}</tbody>
        </table>
        """

    def page(self, request: Request) -> Response:
        crud = self.crud
        caps = crud.capabilities
        title = f"{crud.singular} Manager"
        breadcrumbs = render_breadcrumbs(
            [
                Breadcrumb("Home", crud.url_home()),
                Breadcrumb(title, crud.url_entity_manager()),
            ]
        )

        try:
            rows = list(crud.config.func_rows())
        except Exception:
            logger.exception("Listing %s failed", crud.plural)
            table = RETRY_LATER_ALERT
        else:
            table = self._table(rows)

        button_create = ""
        if caps.can_create:
            button_create = (
                f"<button type='button' class='btn btn-success float-end' v-on:click='showEntityCreateModal'>"
                f"{icon('bi-plus-circle')}New {h(crud.singular)}</button>"
            )

        content = f"""
        <div id='entity-manager' class='container'>
          <h1>{h(title)}{button_create}</h1>
          {breadcrumbs}
          {crud.creator.modal() if caps.can_create else ''}
          {crud.trasher.modal() if caps.can_trash else ''}
          {table}
        </div>
        """

        create_fields = crud.config.create_fields
        page_data = {
            "urls": {
                "create": crud.url_entity_create_ajax(),
                "update": crud.url_entity_update() if caps.can_update else "",
                "trash": crud.url_entity_trash_ajax(),
                "manager": crud.url_entity_manager(),
            },
            "values": {f.name: f.value for f in create_fields if f.name},
        }
        script = page_script(page_data, MANAGER_JS, vue_mount("EntityManager", "entity-manager", create_fields))
        css, js = widget_assets(create_fields)
        body = render_layout(
            crud,
            request,
            title,
            content,
            [DATATABLES_CSS] + css,
            "html{width:100%;}",
            [DATATABLES_JS] + js,
            script,
        )
        return html_response(body)


class EntityCreateController:
    def __init__(self, crud: "Crud"):
        self.crud = crud

    def modal(self) -> str:
        crud = self.crud
        form = "".join(render_form(crud.config.create_fields, crud.config.file_manager_url))
        return f"""
        <div id='ModalEntityCreate' class='modal fade' tabindex='-1'>
          <div class='modal-dialog'>
            <div class='modal-content'>
              <div class='modal-header'>
                <h5 class='modal-title' style='margin:0px;'>New {h(crud.singular)}</h5>
                <button type='button' class='btn-close' data-bs-dismiss='modal' aria-label='Close'></button>
              </div>
              <div class='modal-body'>{form}</div>
              <div class='modal-footer' style='display:flex;justify-content:space-between;'>
                <button type='button' class='btn btn-secondary' data-bs-dismiss='modal'>{icon('bi-chevron-left')}Close</button>
                <button type='button' class='btn btn-primary' v-on:click='entityCreate'>{icon('bi-check')}Create &amp; Continue</button>
              </div>
            </div>
          </div>
        </div>
        """

    def modal_show(self, request: Request) -> Response:
        return html_response(self.modal())

    def modal_save(self, request: Request) -> Response:
        crud = self.crud
        if not crud.capabilities.can_create:
            return api_error("FuncCreate is required")

        data, problem = collect_posted(request, crud.config.create_fields)
        if problem:
            return api_error(problem)

        try:
            entity_id = crud.config.func_create(data)
        except Exception as exc:
            logger.warning("Creating %s failed: %s", crud.singular, exc)
            return api_error("Save failed: " + error_text(exc))

        return api_success("Saved successfully", {"entity_id": str(entity_id)})


class EntityReadController:
    def __init__(self, crud: "Crud"):
        self.crud = crud

    def _table(self, pairs: Sequence[Tuple[str, str]]) -> str:
        rows = "".join(
            [f"<tr><th>{cell_html(key)}</th><td>{cell_html(value)}</td></tr>" for key, value in pairs]
        )
        return f"<table class='table table-hover table-striped'><tbody>{rows}</tbody></table>"

    def page(self, request: Request) -> Response:
        crud = self.crud
        entity_id = posted_value(request, "entity_id") or ""
        if entity_id == "":
            return api_error("Entity ID is required")
        if not crud.capabilities.can_read:
            return api_error("FuncFetchReadData is required")

        title = f"View {crud.singular}"
        breadcrumbs = render_breadcrumbs(
            [
                Breadcrumb("Home", crud.url_home()),
                Breadcrumb(f"{crud.singular} Manager", crud.url_entity_manager()),
                Breadcrumb(title, crud.url_entity_read(entity_id)),
            ]
        )

        button_edit = ""
        if crud.capabilities.can_update:
            button_edit = (
                f"<a class='btn btn-primary ms-2 float-end' href='{h(crud.url_entity_update(entity_id))}'>"
                f"{icon('bi-pencil-square')}Edit</a>"
            )
        button_back = (
            f"<a class='btn btn-secondary ms-2 float-end' href='{h(crud.url_entity_manager())}'>"
            f"{icon('bi-chevron-left')}Back</a>"
        )

        try:
            pairs = list(crud.config.func_fetch_read_data(entity_id))
        except Exception:
            logger.exception("Fetching %s %s for read failed", crud.singular, entity_id)
            details = RETRY_LATER_ALERT
        else:
            details = self._table(pairs)

        extras = ""
        if crud.config.func_read_extras is not None:
            extras = "".join(crud.config.func_read_extras(entity_id))

        content = f"""
        <div id='entity-read' class='container'>
          <h1>{h(title)}{button_edit}{button_back}</h1>
          {breadcrumbs}
          <div class='card'>
            <div class='card-header' style='display:flex;justify-content:space-between;align-items:center;'>
              <h4 style='margin-bottom:0;display:inline-block;'>{h(crud.singular)} Details</h4>
            </div>
            <div class='card-body'>{details}</div>
          </div>
          {extras}
        </div>
        """
        return html_response(render_layout(crud, request, title, content))


class EntityUpdateController:
    def __init__(self, crud: "Crud"):
        self.crud = crud

    def page(self, request: Request) -> Response:
        crud = self.crud
        entity_id = posted_value(request, "entity_id") or ""
        if entity_id == "":
            return api_error("Entity ID is required")
        if not crud.capabilities.can_update:
            return api_error("FuncFetchUpdateData is required")

        try:
            values = crud.config.func_fetch_update_data(entity_id)
        except Exception:
            logger.exception("Fetching %s %s for update failed", crud.singular, entity_id)
            return api_error("Fetch data failed")

        title = f"Edit {crud.singular}"
        breadcrumbs = render_breadcrumbs(
            [
                Breadcrumb("Home", crud.url_home()),
                Breadcrumb(f"{crud.singular} Manager", crud.url_entity_manager()),
                Breadcrumb(title, crud.url_entity_update(entity_id)),
            ]
        )
        update_fields = crud.config.update_fields or ()
        form = "".join(render_form(update_fields, crud.config.file_manager_url))
        content = f"""
        <div id='entity-update' class='container'>
          <h1>{h(title)}
            <button type='button' class='btn btn-success float-end' v-on:click='entitySave(true)'>{icon('bi-check-all')}Save</button>
            <button type='button' class='btn btn-success float-end' style='margin-right:10px;' v-on:click='entitySave'>{icon('bi-check')}Apply</button>
          </h1>
          {breadcrumbs}
          {form}
        </div>
        """

        page_data = {
            "entityId": entity_id,
            "urls": {
                "update": crud.url_entity_update_ajax(),
                "trash": crud.url_entity_trash_ajax(),
                "manager": crud.url_entity_manager(),
            },
            "values": {str(k): "" if v is None else str(v) for k, v in dict(values or {}).items()},
        }
        script = page_script(page_data, UPDATE_JS, vue_mount("EntityUpdate", "entity-update", update_fields))
        css, js = widget_assets(update_fields)
        return html_response(render_layout(crud, request, title, content, css, "", js, script))

    def page_save(self, request: Request) -> Response:
        crud = self.crud
        entity_id = request_entity_id(request)
        if entity_id == "":
            return api_error("Entity ID is required")
        if not crud.capabilities.can_update:
            return api_error("FuncUpdate is required")

        data, problem = collect_posted(request, crud.config.update_fields or ())
        if problem:
            return api_error(problem)

        try:
            crud.config.func_update(entity_id, data)
        except Exception as exc:
            logger.warning("Updating %s %s failed: %s", crud.singular, entity_id, exc)
            return api_error("Save failed: " + error_text(exc))

        return api_success("Saved successfully", {"entity_id": entity_id})


class EntityTrashController:
    def __init__(self, crud: "Crud"):
        self.crud = crud

    def modal(self) -> str:
        return """
        <div id='ModalEntityTrash' class='modal fade' tabindex='-1'>
          <div class='modal-dialog'>
            <div class='modal-content'>
              <div class='modal-header'><h5 class='modal-title'>Trash Entity</h5></div>
              <div class='modal-body'><p>Are you sure you want to move this entity to trash bin?</p></div>
              <div class='modal-footer'>
                <button type='button' class='btn btn-secondary' data-bs-dismiss='modal'>Close</button>
                <button type='button' class='btn btn-danger' v-on:click='entityTrash'>Move to trash bin</button>
              </div>
            </div>
          </div>
        </div>
        """

    def trash_ajax(self, request: Request) -> Response:
        crud = self.crud
        entity_id = request_entity_id(request)
        if entity_id == "":
            return api_error("Entity ID is required")
        if not crud.capabilities.can_trash:
            return api_error("FuncTrash is required")

        try:
            crud.config.func_trash(entity_id)
        except Exception as exc:
            logger.warning("Trashing %s %s failed: %s", crud.singular, entity_id, exc)
            return api_error("Entity failed to be trashed: " + error_text(exc))

        return api_success("Entity trashed successfully", {"entity_id": entity_id})
