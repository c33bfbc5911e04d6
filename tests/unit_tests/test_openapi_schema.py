from src.main import initialize_backend_application


def test_openapi_includes_every_api_group_without_startup():
    app = initialize_backend_application()
    schema = app.openapi()

    assert "openapi" in schema
    assert "paths" in schema

    paths = schema["paths"]
    prefix = "/noi-intervistiamo/api"
    assert f"{prefix}/health" in paths
    assert f"{prefix}/ping" in paths
    assert f"{prefix}/auth/login" in paths
    assert f"{prefix}/users/search" in paths
    assert f"{prefix}/roles/{{id}}/toggle-status" in paths
    assert f"{prefix}/candidates/{{id}}/notes" in paths
    assert f"{prefix}/notifications/mark-all-read" in paths
    assert f"{prefix}/files/upload" in paths
    assert f"{prefix}/dashboard/alerts/{{id}}/read" in paths
    assert f"{prefix}/datalist/user-color-palettes" in paths

    tags = schema.get("tags", [])
    tag_names = {t.get("name") for t in tags}
    assert {"auth", "users", "roles", "departments", "candidates", "interviews", "files"}.issubset(tag_names)


def test_schemas_use_camel_case_properties():
    app = initialize_backend_application()
    schema = app.openapi()

    schemas = schema.get("components", {}).get("schemas", {})

    login_schema = schemas.get("LoginRequest")
    assert login_schema is not None
    assert "rememberMe" in login_schema.get("properties", {})

    role_schema = schemas.get("RoleInCreate")
    assert role_schema is not None
    role_props = role_schema.get("properties", {})
    assert "hasHRAccess" in role_props
    assert "hasTechnicalAccess" in role_props
    assert set(role_schema.get("required", [])) == {"name", "code", "color"}
