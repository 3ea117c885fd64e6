from __future__ import annotations

import html
import json
from typing import Iterable

from crud.fields import Breadcrumb

RAW_OPEN = "{!!"
RAW_CLOSE = "!!}"

_SCRIPT_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def h(value: object) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def is_raw(text: str) -> bool:
    """True when `text` is wrapped as `{!! ... !!}` (render unescaped)."""
    return text.startswith(RAW_OPEN) and text.endswith(RAW_CLOSE)


def strip_raw_markers(text: str) -> str:
    return text.replace(RAW_OPEN, "").replace(RAW_CLOSE, "").strip()


def cell_html(text: object, force_raw: bool = False) -> str:
    value = "" if text is None else str(text)
    raw = force_raw or is_raw(value)
    value = strip_raw_markers(value)
    return value if raw else h(value)


def script_json(value: object) -> str:
    """Serialize `value` as a JS literal that is safe inside a <script> block."""
    encoded = json.dumps(value)
    for char, escaped in _SCRIPT_JSON_ESCAPES.items():
        encoded = encoded.replace(char, escaped)
    return encoded


def model_ref(name: str, model: str = "entityModel") -> str:
    if name.isidentifier():
        return f"{model}.{name}"
    return f"{model}[{json.dumps(name)}]"


def render_breadcrumbs(items: Iterable[Breadcrumb]) -> str:
    links = "".join(
        [f"<li class='breadcrumb-item'><a href='{h(item.url)}'>{h(item.name)}</a></li>" for item in items]
    )
    return f"<nav aria-label='breadcrumb'><ol class='breadcrumb'>{links}</ol></nav>"


def icon(name: str, extra_class: str = "me-2") -> str:
    return f"<i class='bi {h(name)} {h(extra_class)}'></i>"
