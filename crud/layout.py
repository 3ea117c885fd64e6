"""Page shell and asset wiring.

When the embedding application supplies `func_layout`, the framework assets
every page relies on are prepended to the page's own asset lists before the
call. Otherwise a minimal built-in shell is rendered.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from crud.markup import h

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
BOOTSTRAP_JS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js"
BOOTSTRAP_ICONS_CSS = "https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css"
JQUERY_JS = "https://code.jquery.com/jquery-3.7.1.min.js"
VUE_JS = "https://unpkg.com/vue@3/dist/vue.global.js"
SWEETALERT2_JS = "https://cdn.jsdelivr.net/npm/sweetalert2@11"
HTMX_JS = "https://unpkg.com/htmx.org@2.0.0"
ELEMENT_PLUS_CSS = "https://unpkg.com/element-plus@2.3.8/dist/index.css"
ELEMENT_PLUS_JS = "https://unpkg.com/element-plus@2.3.8/dist/index.full.js"
DATATABLES_CSS = "https://cdn.datatables.net/1.13.4/css/jquery.dataTables.min.css"
DATATABLES_JS = "https://cdn.datatables.net/1.13.4/js/jquery.dataTables.min.js"
TRUMBOWYG_CSS = "https://cdn.jsdelivr.net/npm/trumbowyg@2.27.3/dist/ui/trumbowyg.min.css"
TRUMBOWYG_JS = "https://cdn.jsdelivr.net/npm/trumbowyg@2.27.3/dist/trumbowyg.min.js"
VUE_TRUMBOWYG_JS = "https://cdn.jsdelivr.net/npm/vue-trumbowyg@4"

# Order matters: later scripts depend on earlier ones.
LAYOUT_BASELINE_JS = [HTMX_JS, SWEETALERT2_JS, VUE_JS, ELEMENT_PLUS_JS]
LAYOUT_BASELINE_CSS = [ELEMENT_PLUS_CSS]
WEBPAGE_BASELINE_CSS = [BOOTSTRAP_CSS, BOOTSTRAP_ICONS_CSS]
WEBPAGE_BASELINE_JS = [BOOTSTRAP_JS, JQUERY_JS, VUE_JS, SWEETALERT2_JS, HTMX_JS]

FAVICON = "data:image/x-icon;base64,AAABAAEAEBAQAAEABAAoAQAAFgAAACgAAAAQAAAAIAAAAAEABAAAAAAAgAAAAAAAAAAAAAAAEAAAAAAAAAAAAAAAmzKzAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAABEQEAAQERAAEAAQABAAEAAQABAQEBEQABAAEREQEAAAERARARAREAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAD//wAA//8AAP//AAD//wAA//8AAP//AAD//wAAi6MAALu7AAC6owAAuC8AAIkjAAD//wAA//8AAP//AAD//wAA"

BASE_STYLE = """
html,body{height:100%;font-family:Ubuntu,sans-serif;}
body{
  font-family:"Nunito",sans-serif;
  font-size:0.9rem;
  font-weight:400;
  line-height:1.6;
  color:#212529;
  text-align:left;
  background-color:#f8fafc;
}
.form-select{
  display:block;
  width:100%;
  padding:.375rem 2.25rem .375rem .75rem;
  font-size:1rem;
  line-height:1.5;
  color:#212529;
  background-color:#fff;
  border:1px solid #ced4da;
  border-radius:.25rem;
  appearance:none;
}
"""


def merge_assets(baseline: Sequence[str], extra: Optional[Sequence[str]]) -> List[str]:
    merged: List[str] = []
    for url in list(baseline) + list(extra or []):
        if url and url not in merged:
            merged.append(url)
    return merged


def render_webpage(
    title: str,
    content: str,
    style_files: Optional[Sequence[str]] = None,
    style: str = "",
    js_files: Optional[Sequence[str]] = None,
    js: str = "",
) -> str:
    styles = "".join(
        [f'<link rel="stylesheet" href="{h(url)}" />' for url in merge_assets(WEBPAGE_BASELINE_CSS, style_files)]
    )
    scripts = "".join(
        [f'<script src="{h(url)}"></script>' for url in merge_assets(WEBPAGE_BASELINE_JS, js_files)]
    )
    extra_style = f"<style>{style}</style>" if style else ""
    inline_script = f"<script>{js}</script>" if js else ""
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width,initial-scale=1" />
    <title>{h(title)}</title>
    <link rel="icon" type="image/x-icon" href="{FAVICON}" />
    {styles}
    <style>{BASE_STYLE}</style>
    {extra_style}
  </head>
  <body>
    {content}
    {scripts}
    {inline_script}
  </body>
</html>
"""


def render_layout(
    crud: Any,
    request: Any,
    title: str,
    content: str,
    style_files: Optional[Sequence[str]] = None,
    style: str = "",
    js_files: Optional[Sequence[str]] = None,
    js: str = "",
) -> str:
    func_layout = crud.config.func_layout
    if func_layout is None:
        return render_webpage(title, content, style_files, style, js_files, js)
    return func_layout(
        request,
        title,
        content,
        merge_assets(LAYOUT_BASELINE_CSS, style_files),
        style,
        merge_assets(LAYOUT_BASELINE_JS, js_files),
        js,
    )
