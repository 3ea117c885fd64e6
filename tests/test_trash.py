TRASH_URL = "/admin/users?path=entity-trash-ajax"


def test_trash_success(client, store):
    response = client.post(TRASH_URL, data={"entity_id": " ID3 "})
    assert response.status_code == 200
    assert response.json == {
        "status": "success",
        "message": "Entity trashed successfully",
        "data": {"entity_id": "ID3"},
    }
    assert store.trashed == ["ID3"]


def test_trash_requires_entity_id(client, store):
    response = client.post(TRASH_URL, data={"entity_id": ""})
    assert response.json == {"status": "error", "message": "Entity ID is required"}
    assert store.trashed == []


def test_trash_accepts_query_parameter(client, store):
    client.get(TRASH_URL + "&entity_id=ID1")
    assert store.trashed == ["ID1"]


def test_trash_callback_error(make_client):
    def failing_trash(entity_id):
        raise PermissionError("locked")

    response = make_client(func_trash=failing_trash).post(TRASH_URL, data={"entity_id": "ID1"})
    assert response.json == {"status": "error", "message": "Entity failed to be trashed: locked"}


def test_trash_without_callback(make_client):
    response = make_client(func_trash=None).post(TRASH_URL, data={"entity_id": "ID1"})
    assert response.json == {"status": "error", "message": "FuncTrash is required"}


def test_json_responses_carry_security_headers(client):
    response = client.post(TRASH_URL, data={"entity_id": "ID1"})
    assert response.content_type.startswith("application/json")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
