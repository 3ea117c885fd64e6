"""Field schema and row value objects.

Everything here is plain data: the embedding application builds these once at
configuration time and the handlers only read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    IMAGE = "image"
    IMAGE_INLINE = "image_inline"
    HTMLAREA = "htmlarea"
    BLOCKAREA = "blockarea"
    DATETIME = "datetime"
    PASSWORD = "password"
    RAW = "raw"

    @classmethod
    def parse(cls, value: object) -> "FieldType":
        # Unknown keys render as a plain text input.
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.STRING


@dataclass(frozen=True)
class FormFieldOption:
    key: str
    value: str


@dataclass(frozen=True)
class FormField:
    """One input of a create/update form.

    `name` is both the posted form key and the client-side model key, so it
    must be unique within a field list. `raw` fields may leave it empty.
    """

    name: str = ""
    type: FieldType = FieldType.STRING
    id: str = ""
    value: str = ""
    label: str = ""
    help: str = ""
    options: Tuple[FormFieldOption, ...] = ()
    options_provider: Optional[Callable[[], Sequence[FormFieldOption]]] = None
    required: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FieldType.parse(self.type))
        object.__setattr__(self, "options", tuple(self.options or ()))

    @property
    def display_label(self) -> str:
        return self.label or self.name

    def all_options(self) -> List[FormFieldOption]:
        opts = list(self.options)
        if self.options_provider is not None:
            opts.extend(self.options_provider())
        return opts


@dataclass(frozen=True)
class Row:
    id: str
    data: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Breadcrumb:
    name: str
    url: str
