"""Server-side CRUD admin screens for arbitrary entity types."""

from crud.config import Capabilities, Config, CrudConfigError, validate_config
from crud.fields import Breadcrumb, FieldType, FormField, FormFieldOption, Row
from crud.server import Crud, Route, new_crud

__all__ = [
    "Breadcrumb",
    "Capabilities",
    "Config",
    "Crud",
    "CrudConfigError",
    "FieldType",
    "FormField",
    "FormFieldOption",
    "Route",
    "Row",
    "new_crud",
    "validate_config",
]
