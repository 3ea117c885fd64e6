from crud import Crud, Route


def test_home_aliases_resolve_to_manager(make_config):
    crud = Crud(make_config())
    manager = crud.handler_for("")
    assert crud.handler_for(None) == manager
    assert crud.handler_for("home") == manager
    assert crud.handler_for("entity-manager") == manager
    assert crud.handler_for("no-such-page") == manager
    assert manager == crud.manager.page


def test_fixed_route_table(make_config):
    crud = Crud(make_config())
    assert crud.handler_for("entity-create-modal") == crud.creator.modal_show
    assert crud.handler_for("entity-create-ajax") == crud.creator.modal_save
    assert crud.handler_for("entity-read") == crud.reader.page
    assert crud.handler_for("entity-update") == crud.updater.page
    assert crud.handler_for("entity-update-ajax") == crud.updater.page_save
    assert crud.handler_for("entity-trash-ajax") == crud.trasher.trash_ajax


def test_route_parse_defaults_to_home():
    assert Route.parse(None) is Route.HOME
    assert Route.parse("  ") is Route.HOME
    assert Route.parse("ENTITY-READ") is Route.HOME
    assert Route.parse("entity-read") is Route.ENTITY_READ


def test_unknown_path_renders_manager_page(client):
    response = client.get("/admin/users?path=whatever")
    assert response.status_code == 200
    assert "User Manager" in response.get_data(as_text=True)


def test_url_helpers_respect_existing_query(make_config):
    plain = Crud(make_config(endpoint="/admin/users"))
    assert plain.url_entity_manager() == "/admin/users?path=entity-manager"
    assert plain.url_entity_create_modal() == "/admin/users?path=entity-create-modal"
    assert plain.url_entity_read() == "/admin/users?path=entity-read"
    assert plain.url_entity_update("ID 1") == "/admin/users?path=entity-update&entity_id=ID+1"

    nested = Crud(make_config(endpoint="/admin?section=users"))
    assert nested.url_entity_trash_ajax() == "/admin?section=users&path=entity-trash-ajax"


def test_unexpected_handler_error_returns_500(make_client):
    def broken_extras(entity_id):
        raise RuntimeError("boom")

    client = make_client(func_read_extras=broken_extras)
    response = client.get("/admin/users?path=entity-read&entity_id=ID1")
    assert response.status_code == 500
    assert "boom" not in response.get_data(as_text=True)
