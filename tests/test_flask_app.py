from flask import Flask

from crud import Crud
from crud.flask_app import create_app, mount_crud


def test_create_app_mounts_each_crud(make_config):
    users = Crud(make_config())
    posts = Crud(make_config(endpoint="/admin/posts", entity_name_singular="Post", entity_name_plural="Posts"))
    app = create_app(users, posts)
    client = app.test_client()

    assert client.get("/healthz").data == b"ok"
    assert b"User Manager" in client.get("/admin/users").data
    assert b"Post Manager" in client.get("/admin/posts?path=entity-manager").data


def test_mounted_actions_round_trip_through_flask(make_config, store):
    app = create_app(Crud(make_config()))
    client = app.test_client()

    response = client.post("/admin/users?path=entity-create-ajax", data={"name": "Ada"})
    assert response.status_code == 200
    assert response.get_json()["data"] == {"entity_id": "ID4"}
    assert store.created == [{"name": "Ada"}]


def test_mount_crud_uses_endpoint_path(make_config):
    app = Flask(__name__)
    crud = Crud(make_config(endpoint="https://example.org/backend/users?tab=1"))
    assert mount_crud(app, crud) == "/backend/users"
    assert mount_crud(app, crud, rule="/other", endpoint="other") == "/other"
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {"/backend/users", "/other"} <= rules
