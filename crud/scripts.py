"""Client-side page scripts.

Each page script expects a `crudPage` constant holding the page data (URLs,
model defaults, entity id) to be declared ahead of it; see `page_script()`.
"""

from __future__ import annotations

from typing import Dict, Sequence

from crud.fields import FieldType, FormField
from crud.layout import (
    ELEMENT_PLUS_CSS,
    ELEMENT_PLUS_JS,
    TRUMBOWYG_CSS,
    TRUMBOWYG_JS,
    VUE_TRUMBOWYG_JS,
)
from crud.markup import script_json

TRUMBOWYG_CONFIG: Dict[str, object] = {
    "btns": [
        ["undo", "redo"],
        ["formatting"],
        ["strong", "em", "del", "superscript", "subscript"],
        ["link", "justifyLeft", "justifyRight", "justifyCenter", "justifyFull"],
        ["unorderedList", "orderedList"],
        ["horizontalRule"],
        ["removeformat"],
        ["fullscreen"],
    ],
    "autogrow": True,
    "removeformatPasted": True,
    "tagsToRemove": ["script", "link", "embed", "iframe", "input"],
    "tagsToKeep": ["hr", "img", "i"],
    "autogrowOnEnter": True,
    "linkTargets": ["_blank"],
}

UPLOAD_IMAGE_METHOD = """
    uploadImage(event, fieldName) {
      const self = this;
      if (event.target.files && event.target.files[0]) {
        const reader = new FileReader();
        reader.onload = function (e) {
          self.entityModel[fieldName] = e.target.result;
          event.target.value = "";
        };
        reader.readAsDataURL(event.target.files[0]);
      }
    },
"""

MANAGER_JS = """
const EntityManager = {
  data() {
    return {
      entityModel: {...crudPage.values},
      entityTrashModel: {entityId: null},
      tmp: {},
      trumbowigConfig: crudPage.trumbowygConfig,
    };
  },
  created() {
    this.initDataTable();
  },
  methods: {
    initDataTable() {
      $(() => {
        if (document.getElementById('TableEntities')) {
          $('#TableEntities').DataTable({order: [[0, 'asc']]});
        }
      });
    },
    showEntityCreateModal() {
      bootstrap.Modal.getOrCreateInstance(document.getElementById('ModalEntityCreate')).show();
    },
    showEntityTrashModal(entityId) {
      this.entityTrashModel.entityId = entityId;
      bootstrap.Modal.getOrCreateInstance(document.getElementById('ModalEntityTrash')).show();
    },
    entityCreate() {
      $.post(crudPage.urls.create, {...this.entityModel}).done((response) => {
        if (response.status !== 'success') {
          return Swal.fire({icon: 'error', title: 'Oops...', text: response.message});
        }
        bootstrap.Modal.getOrCreateInstance(document.getElementById('ModalEntityCreate')).hide();
        if (crudPage.urls.update) {
          return location.href = crudPage.urls.update + '&entity_id=' + encodeURIComponent(response.data.entity_id);
        }
        return location.href = crudPage.urls.manager;
      }).fail((result) => {
        return Swal.fire({icon: 'error', title: 'Oops...', text: result.statusText});
      });
    },
    entityTrash() {
      const entityId = this.entityTrashModel.entityId;
      $.post(crudPage.urls.trash, {entity_id: entityId}).done((response) => {
        if (response.status !== 'success') {
          return Swal.fire({icon: 'error', title: 'Oops...', text: response.message});
        }
        setTimeout(() => { location.href = location.href; }, 3000);
        return Swal.fire({icon: 'success', title: 'Entity trashed'});
      }).fail((result) => {
        return Swal.fire({icon: 'error', title: 'Oops...', text: result.statusText});
      });
    },
__UPLOAD_IMAGE__
  },
};
""".replace("__UPLOAD_IMAGE__", UPLOAD_IMAGE_METHOD)

UPDATE_JS = """
const EntityUpdate = {
  data() {
    return {
      entityModel: {entityId: crudPage.entityId, ...crudPage.values},
      tmp: {},
      trumbowigConfig: crudPage.trumbowygConfig,
    };
  },
  methods: {
    entitySave(redirect) {
      const data = JSON.parse(JSON.stringify(this.entityModel));
      data.entity_id = data.entityId;
      delete data.entityId;
      $.post(crudPage.urls.update, data).done((response) => {
        if (response.status !== 'success') {
          return Swal.fire({icon: 'error', title: 'Oops...', text: response.message});
        }
        if (redirect === true) {
          setTimeout(() => { window.location.href = crudPage.urls.manager; }, 3000);
        }
        return Swal.fire({icon: 'success', title: 'Entity saved'});
      }).fail((result) => {
        return Swal.fire({icon: 'error', title: 'Oops...', text: result.statusText});
      });
    },
__UPLOAD_IMAGE__
  },
};
""".replace("__UPLOAD_IMAGE__", UPLOAD_IMAGE_METHOD)


def field_types(fields: Sequence[FormField]):
    return {f.type for f in fields}


def widget_assets(fields: Sequence[FormField]):
    """Extra (css, js) URLs needed by the widgets in `fields`."""
    types = field_types(fields)
    css, js = [], []
    if FieldType.DATETIME in types:
        css.append(ELEMENT_PLUS_CSS)
        js.append(ELEMENT_PLUS_JS)
    if FieldType.HTMLAREA in types:
        css.append(TRUMBOWYG_CSS)
        js.extend([TRUMBOWYG_JS, VUE_TRUMBOWYG_JS])
    return css, js


def vue_mount(app_name: str, element_id: str, fields: Sequence[FormField]) -> str:
    types = field_types(fields)
    chain = f"Vue.createApp({app_name})"
    if FieldType.DATETIME in types:
        chain += ".use(ElementPlus)"
    if FieldType.HTMLAREA in types:
        chain += ".component('Trumbowyg', VueTrumbowyg.default)"
    return f"{chain}.mount('#{element_id}');"


def page_script(page_data: Dict[str, object], body: str, mount: str) -> str:
    data = dict(page_data)
    data.setdefault("trumbowygConfig", TRUMBOWYG_CONFIG)
    return f"const crudPage = {script_json(data)};\n{body}\n{mount}\n"
