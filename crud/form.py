"""Form renderer: one form-group fragment per field, in declaration order.

Inputs bind two-way to the page's client model (`entityModel`) through
`v-model`, and also carry a `name` so the markup works as a plain form.
"""

from __future__ import annotations

import json
import secrets
import string
from typing import List, Sequence

from crud.fields import FieldType, FormField
from crud.markup import cell_html, h, model_ref

NO_IMAGE_URL = "https://www.freeiconspng.com/uploads/no-image-icon-11.PNG"
FIELD_ID_ALPHABET = string.ascii_lowercase + string.digits
BLOCKAREA_INIT_DELAY_MS = 2000


def random_field_id() -> str:
    return "id_" + "".join(secrets.choice(FIELD_ID_ALPHABET) for _ in range(32))


def _input(field_id: str, name: str, input_type: str = "text") -> str:
    return (
        f"<input type='{input_type}' class='form-control' id='{h(field_id)}' name='{h(name)}'"
        f" v-model='{h(model_ref(name))}' />"
    )


def _textarea(field_id: str, name: str) -> str:
    return (
        f"<textarea class='form-control' id='{h(field_id)}' name='{h(name)}'"
        f" v-model='{h(model_ref(name))}'></textarea>"
    )


def _select(field: FormField, field_id: str) -> str:
    options = "".join(
        [f"<option value='{h(opt.key)}'>{h(opt.value)}</option>" for opt in field.all_options()]
    )
    return (
        f"<select class='form-select' id='{h(field_id)}' name='{h(field.name)}'"
        f" v-model='{h(model_ref(field.name))}'>{options}</select>"
    )


def _image(field_id: str, name: str, file_manager_url: str) -> str:
    ref = model_ref(name)
    browse = ""
    if file_manager_url:
        browse = (
            f"<span class='input-group-text'>"
            f"<a href='{h(file_manager_url)}' target='_blank'>Browse</a></span>"
        )
    return f"""
    <div>
      <img v-bind:src='{h(ref + " || " + json.dumps(NO_IMAGE_URL))}' style='width:200px;' />
      <div class='input-group'>
        <input type='url' class='form-control' id='{h(field_id)}' name='{h(name)}' v-model='{h(ref)}' />
        {browse}
      </div>
    </div>
    """


def _image_inline(field_id: str, name: str) -> str:
    ref = model_ref(name)
    toggle = model_ref("show_url_" + name, model="tmp")
    return f"""
    <div>
      <img v-bind:src='{h(ref + " || " + json.dumps(NO_IMAGE_URL))}' style='width:200px;' />
      <input type='file' accept='image/*' id='{h(field_id)}' v-on:change='{h("uploadImage($event, " + json.dumps(name) + ")")}' />
      <button type='button' class='btn btn-sm btn-outline-secondary' v-on:click='{h(toggle + " = !" + toggle)}'>See Image Data</button>
      <textarea class='form-control' name='{h(name)}' v-if='{h(toggle)}' v-model='{h(ref)}'></textarea>
    </div>
    """


def _datetime(field_id: str, name: str) -> str:
    return f"<el-date-picker type='datetime' id='{h(field_id)}' name='{h(name)}' v-model='{h(model_ref(name))}'></el-date-picker>"


def _htmlarea(field_id: str, name: str) -> str:
    return (
        f"<trumbowyg class='form-control' id='{h(field_id)}' name='{h(name)}'"
        f" v-model='{h(model_ref(name))}' :config='trumbowigConfig'></trumbowyg>"
    )


def _blockarea_script(field_id: str) -> str:
    return f"""<component :is="'script'">setTimeout(() => {{
      const blockArea = new BlockArea({h(json.dumps(field_id))});
      blockArea.registerBlock(BlockAreaHeading);
      blockArea.registerBlock(BlockAreaText);
      blockArea.registerBlock(BlockAreaImage);
      blockArea.registerBlock(BlockAreaCode);
      blockArea.registerBlock(BlockAreaRawHtml);
      blockArea.init();
    }}, {BLOCKAREA_INIT_DELAY_MS})</component>"""


def render_widget(field: FormField, field_id: str, file_manager_url: str = "") -> str:
    kind = field.type
    name = field.name
    if kind == FieldType.NUMBER:
        return _input(field_id, name, "number")
    if kind == FieldType.PASSWORD:
        return _input(field_id, name, "password")
    if kind in (FieldType.TEXTAREA, FieldType.BLOCKAREA):
        return _textarea(field_id, name)
    if kind == FieldType.SELECT:
        return _select(field, field_id)
    if kind == FieldType.DATETIME:
        return _datetime(field_id, name)
    if kind == FieldType.HTMLAREA:
        return _htmlarea(field_id, name)
    if kind == FieldType.IMAGE:
        return _image(field_id, name, file_manager_url)
    if kind == FieldType.IMAGE_INLINE:
        return _image_inline(field_id, name)
    return _input(field_id, name)


def render_form(fields: Sequence[FormField], file_manager_url: str = "") -> List[str]:
    fragments: List[str] = []
    for field in fields:
        if field.type == FieldType.RAW:
            fragments.append(field.value)
            continue

        field_id = field.id or random_field_id()
        required = "<sup class='text-danger ml-1'>*</sup>" if field.required else ""
        label = f"<label class='form-label' for='{h(field_id)}'>{h(field.display_label)}{required}</label>"
        help_text = f"<p class='text-info'>{cell_html(field.help)}</p>" if field.help else ""
        widget = render_widget(field, field_id, file_manager_url)
        fragments.append(f"<div class='form-group mb-3'>{label}{widget}{help_text}</div>")

        if field.type == FieldType.BLOCKAREA:
            fragments.append(_blockarea_script(field_id))
    return fragments
