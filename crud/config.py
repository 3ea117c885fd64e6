"""Handler configuration.

A `Config` is built once by the embedding application. Callbacks signal
failure by raising; the handlers translate those exceptions into a page alert
(list/read pages) or an error payload (actions).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from crud.fields import FormField, Row

RowsFunc = Callable[[], Sequence[Row]]
FetchReadFunc = Callable[[str], Sequence[Tuple[str, str]]]
FetchUpdateFunc = Callable[[str], Dict[str, str]]
CreateFunc = Callable[[Dict[str, str]], str]
UpdateFunc = Callable[[str, Dict[str, str]], None]
TrashFunc = Callable[[str], None]
ReadExtrasFunc = Callable[[str], Sequence[str]]
LayoutFunc = Callable[[Any, str, str, List[str], str, List[str], str], str]


class CrudConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Config:
    endpoint: str = ""
    home_url: str = "/"
    entity_name_singular: str = "Entity"
    entity_name_plural: str = "Entities"
    column_names: Tuple[str, ...] = ()
    create_fields: Tuple[FormField, ...] = ()
    read_fields: Tuple[FormField, ...] = ()
    update_fields: Optional[Tuple[FormField, ...]] = None
    file_manager_url: str = ""
    func_rows: Optional[RowsFunc] = None
    func_fetch_read_data: Optional[FetchReadFunc] = None
    func_fetch_update_data: Optional[FetchUpdateFunc] = None
    func_create: Optional[CreateFunc] = None
    func_update: Optional[UpdateFunc] = None
    func_trash: Optional[TrashFunc] = None
    func_read_extras: Optional[ReadExtrasFunc] = None
    func_layout: Optional[LayoutFunc] = None

    def __post_init__(self) -> None:
        for name in ("column_names", "create_fields", "read_fields"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))
        if self.update_fields is not None:
            object.__setattr__(self, "update_fields", tuple(self.update_fields))


@dataclass(frozen=True)
class Capabilities:
    """Which optional callbacks are wired up.

    Computed once so the manager buttons and the handlers agree.
    """

    can_create: bool
    can_read: bool
    can_update: bool
    can_trash: bool

    @classmethod
    def from_config(cls, config: Config) -> "Capabilities":
        return cls(
            can_create=config.func_create is not None,
            can_read=config.func_fetch_read_data is not None,
            can_update=(
                config.func_fetch_update_data is not None
                and config.func_update is not None
                and bool(config.update_fields)
            ),
            can_trash=config.func_trash is not None,
        )


# Carried next to the field values by the edit and trash actions.
RESERVED_FIELD_NAMES = ("entity_id", "entityId")


def _check_field_names(fields: Sequence[FormField]) -> None:
    seen = set()
    for f in fields:
        if not f.name:
            continue
        if f.name in RESERVED_FIELD_NAMES:
            raise CrudConfigError(f"Field name is reserved: {f.name}")
        if f.name in seen:
            raise CrudConfigError(f"Field names must be unique: {f.name}")
        seen.add(f.name)


def validate_config(config: Config) -> Capabilities:
    if config.func_rows is None:
        raise CrudConfigError("FuncRows function is required")
    if not config.update_fields:
        raise CrudConfigError("UpdateFields is required")
    if config.func_fetch_update_data is not None and config.func_update is None:
        raise CrudConfigError("FuncUpdate function is required")
    for fields in (config.create_fields, config.read_fields, config.update_fields):
        _check_field_names(fields)
    return Capabilities.from_config(config)
