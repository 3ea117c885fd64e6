from __future__ import annotations

import pytest
from werkzeug.test import Client

from crud import Config, Crud, FormField, Row

USER_ROWS = [
    Row("ID1", ["Jon", "Doe"]),
    Row("ID2", ["Sarah", "Smith"]),
    Row("ID3", ["Tom", "Sawyer"]),
]


class UserStore:
    """Records every callback invocation so tests can assert on them."""

    def __init__(self):
        self.created = []
        self.updated = []
        self.trashed = []

    def rows(self):
        return list(USER_ROWS)

    def create(self, data):
        self.created.append(dict(data))
        return "ID4"

    def update(self, entity_id, data):
        self.updated.append((entity_id, dict(data)))

    def trash(self, entity_id):
        self.trashed.append(entity_id)

    def fetch_update(self, entity_id):
        return {"first_name": "Charles", "last_name": "Dickens"}

    def fetch_read(self, entity_id):
        return [("First Name", "Charles"), ("Last Name", "Dickens")]


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def make_config(store):
    def build(**overrides):
        options = dict(
            endpoint="/admin/users",
            home_url="/",
            entity_name_singular="User",
            entity_name_plural="Users",
            column_names=["First Name", "Last Name"],
            create_fields=[FormField(name="name", label="Name", required=True)],
            update_fields=[
                FormField(name="first_name", label="First Name", required=True),
                FormField(name="last_name", label="Last Name", required=True),
            ],
            func_rows=store.rows,
            func_create=store.create,
            func_update=store.update,
            func_trash=store.trash,
            func_fetch_update_data=store.fetch_update,
            func_fetch_read_data=store.fetch_read,
        )
        options.update(overrides)
        return Config(**options)

    return build


@pytest.fixture
def make_client(make_config):
    def build(**overrides):
        return Client(Crud(make_config(**overrides)))

    return build


@pytest.fixture
def client(make_client):
    return make_client()
