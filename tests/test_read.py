READ_URL = "/admin/users?path=entity-read"


def test_read_requires_entity_id(client):
    response = client.get(READ_URL)
    assert response.json == {"status": "error", "message": "Entity ID is required"}
    assert "<table" not in response.get_data(as_text=True)


def test_read_requires_callback(make_client):
    response = make_client(func_fetch_read_data=None).get(READ_URL + "&entity_id=ID1")
    assert response.json == {"status": "error", "message": "FuncFetchReadData is required"}


def test_read_renders_pairs_in_order(client):
    response = client.get(READ_URL + "&entity_id=ID1")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "View User" in body
    first = body.index("<th>First Name</th><td>Charles</td>")
    last = body.index("<th>Last Name</th><td>Dickens</td>")
    assert first < last


def test_read_applies_raw_convention_to_keys_and_values(make_client):
    pairs = [
        ("{!!<u>Key</u>!!}", "<b>escaped</b>"),
        ("<i>plain</i>", "{!! <b>Bold</b> !!}"),
    ]
    body = make_client(func_fetch_read_data=lambda entity_id: pairs).get(READ_URL + "&entity_id=ID1").get_data(as_text=True)
    assert "<th><u>Key</u></th><td>&lt;b&gt;escaped&lt;/b&gt;</td>" in body
    assert "<th>&lt;i&gt;plain&lt;/i&gt;</th><td><b>Bold</b></td>" in body


def test_read_fetch_error_renders_alert(make_client):
    def failing_fetch(entity_id):
        raise LookupError("missing row")

    response = make_client(func_fetch_read_data=failing_fetch).get(READ_URL + "&entity_id=ID1")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "alert alert-danger" in body
    assert "missing row" not in body


def test_read_extras_are_appended(make_client):
    def extras(entity_id):
        return [f"<div class='audit'>History of {entity_id}</div>"]

    body = make_client(func_read_extras=extras).get(READ_URL + "&entity_id=ID7").get_data(as_text=True)
    assert "<div class='audit'>History of ID7</div>" in body


def test_read_edit_button_needs_update(make_client, client):
    assert "bi-pencil-square" in client.get(READ_URL + "&entity_id=ID1").get_data(as_text=True)
    no_update = make_client(func_update=None, func_fetch_update_data=None)
    assert "bi-pencil-square" not in no_update.get(READ_URL + "&entity_id=ID1").get_data(as_text=True)
