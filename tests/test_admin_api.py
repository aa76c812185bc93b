from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config.admin_config import AuthConfig, StorageConfig
from config.defaults import DEFAULT_PROJECTS, DEFAULT_SITE_CONFIG
from conftest import ADMIN_PASSWORD
from controller.controller_dependencies import get_auth_config, get_storage_config
from main import app


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture()
def client(auth_config, data_dir):
    app.dependency_overrides[get_auth_config] = lambda: auth_config
    app.dependency_overrides[get_storage_config] = lambda: StorageConfig(data_dirs=(data_dir,))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def headers(client):
    res = client.post("/api/admin/auth", json={"password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}


def _new_project(**overrides):
    project = {
        "id": "new-one",
        "category": "Web",
        "title": "New One",
        "src": "assets/new.png",
        "screenshots": ["1.png"],
        "skills": {"frontend": ["React"], "backend": []},
        "live": "https://new.example.com",
        "content": "Something new",
    }
    project.update(overrides)
    return project


# ---------------- auth ----------------


def test_login_returns_token(client):
    res = client.post("/api/admin/auth", json={"password": ADMIN_PASSWORD})
    body = res.json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["token"].count(".") == 1


@pytest.mark.parametrize("body", [{"password": "nope"}, {}, {"password": 12}, [1]])
def test_login_rejects_bad_password(client, body):
    res = client.post("/api/admin/auth", json=body)
    assert res.status_code == 401
    assert res.json() == {"ok": False, "error": "Invalid password"}


def test_login_without_body_is_unauthorized(client):
    assert client.post("/api/admin/auth").status_code == 401


def test_login_with_malformed_json_is_bad_request(client):
    res = client.post(
        "/api/admin/auth", content=b"{password:", headers={"content-type": "application/json"}
    )
    assert res.status_code == 400


def test_verify_accepts_issued_token(client, headers):
    res = client.get("/api/admin/verify", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"ok": True}


@pytest.mark.parametrize(
    "auth_header", [None, "Basic abc", "Bearer", "Bearer not.a-token", "Bearer abc"]
)
def test_verify_rejects_missing_or_bad_tokens(client, auth_header):
    hdrs = {"Authorization": auth_header} if auth_header else {}
    res = client.get("/api/admin/verify", headers=hdrs)
    assert res.status_code == 401
    assert res.json()["error"] == "Unauthorized"


def test_verify_rejects_expired_token(auth_config, data_dir):
    expired = AuthConfig(
        password_hash=auth_config.password_hash,
        token_secret=auth_config.token_secret,
        token_ttl_seconds=0,
    )
    app.dependency_overrides[get_auth_config] = lambda: expired
    app.dependency_overrides[get_storage_config] = lambda: StorageConfig(data_dirs=(data_dir,))
    try:
        c = TestClient(app)
        token = c.post("/api/admin/auth", json={"password": ADMIN_PASSWORD}).json()["token"]
        res = c.get("/api/admin/verify", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401
    finally:
        app.dependency_overrides.clear()


# ---------------- projects ----------------


def test_projects_default_list(client):
    res = client.get("/api/admin/projects")
    assert res.status_code == 200
    assert [p["id"] for p in res.json()["projects"]] == [p["id"] for p in DEFAULT_PROJECTS]


def test_stored_projects_get_defaults_filled_and_bad_entries_dropped(client, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "projects.json").write_text(
        '[{"id": "bare", "category": "c", "title": "t", "live": "l"}, {"id": 5}, "junk"]',
        encoding="utf-8",
    )
    projects = client.get("/api/admin/projects").json()["projects"]
    assert projects == [
        {
            "id": "bare",
            "category": "c",
            "title": "t",
            "src": "/assets/7.png",
            "screenshots": [],
            "skills": {"frontend": [], "backend": []},
            "github": None,
            "live": "l",
            "content": "",
        }
    ]


def test_add_project_requires_token(client):
    assert client.post("/api/admin/projects", json=_new_project()).status_code == 401


def test_unauthenticated_malformed_body_is_unauthorized(client):
    res = client.post(
        "/api/admin/projects", content=b"{{", headers={"content-type": "application/json"}
    )
    assert res.status_code == 401


def test_add_project_persists_and_normalizes_src(client, headers, data_dir):
    res = client.post("/api/admin/projects", json=_new_project(), headers=headers)
    assert res.status_code == 200
    assert res.json()["project"]["src"] == "/assets/new.png"

    ids = [p["id"] for p in client.get("/api/admin/projects").json()["projects"]]
    assert ids == [p["id"] for p in DEFAULT_PROJECTS] + ["new-one"]
    assert (data_dir / "projects.json").exists()


def test_add_duplicate_project_is_rejected(client, headers):
    dup = _new_project(id=DEFAULT_PROJECTS[0]["id"])
    res = client.post("/api/admin/projects", json=dup, headers=headers)
    assert res.status_code == 400
    assert res.json()["error"] == "Project with this ID already exists"


def test_add_invalid_project_reports_details(client, headers):
    bad = _new_project()
    del bad["title"]
    res = client.post("/api/admin/projects", json=bad, headers=headers)
    body = res.json()
    assert res.status_code == 400
    assert body["error"] == "Invalid project data"
    assert any(d["loc"] == ["title"] for d in body["details"])


def test_update_project(client, headers):
    target = DEFAULT_PROJECTS[0]
    res = client.put(
        "/api/admin/projects",
        json={"id": target["id"], "title": "Renamed", "src": "img/x.png"},
        headers=headers,
    )
    assert res.status_code == 200
    project = res.json()["project"]
    assert project["title"] == "Renamed"
    assert project["src"] == "/img/x.png"
    assert project["skills"] == target["skills"]

    stored = client.get("/api/admin/projects").json()["projects"][0]
    assert stored["title"] == "Renamed"


def test_update_requires_id(client, headers):
    res = client.put("/api/admin/projects", json={"title": "x"}, headers=headers)
    assert res.status_code == 400
    assert res.json()["error"] == "Project ID is required"


def test_update_unknown_project_is_404(client, headers):
    res = client.put("/api/admin/projects", json={"id": "ghost", "title": "x"}, headers=headers)
    assert res.status_code == 404


def test_update_with_bad_field_type_is_400(client, headers):
    res = client.put(
        "/api/admin/projects",
        json={"id": DEFAULT_PROJECTS[0]["id"], "screenshots": "not-a-list"},
        headers=headers,
    )
    assert res.status_code == 400


def test_delete_project(client, headers):
    target = DEFAULT_PROJECTS[0]["id"]
    res = client.delete("/api/admin/projects", params={"id": target}, headers=headers)
    assert res.status_code == 200
    assert res.json() == {"success": True}

    ids = [p["id"] for p in client.get("/api/admin/projects").json()["projects"]]
    assert target not in ids


def test_delete_requires_id_and_existing_project(client, headers):
    assert client.delete("/api/admin/projects", headers=headers).status_code == 400
    res = client.delete("/api/admin/projects", params={"id": "ghost"}, headers=headers)
    assert res.status_code == 404


def test_delete_requires_token(client):
    res = client.delete("/api/admin/projects", params={"id": DEFAULT_PROJECTS[0]["id"]})
    assert res.status_code == 401


# ---------------- resume & site config ----------------


def test_resume_default(client):
    res = client.get("/api/admin/resume")
    assert res.json() == {"resume": DEFAULT_SITE_CONFIG["resume"]}


def test_update_resume(client, headers):
    res = client.put(
        "/api/admin/resume", json={"resume": "https://cv.example.com/me.pdf"}, headers=headers
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "resume": "https://cv.example.com/me.pdf"}
    assert client.get("/api/admin/resume").json() == {"resume": "https://cv.example.com/me.pdf"}


@pytest.mark.parametrize("body", [{"resume": "not a url"}, {"resume": ""}, {}, {"resume": 3}])
def test_update_resume_rejects_invalid_links(client, headers, body):
    res = client.put("/api/admin/resume", json=body, headers=headers)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid resume link"


def test_update_resume_requires_token(client):
    res = client.put("/api/admin/resume", json={"resume": "https://x.example.com"})
    assert res.status_code == 401


def test_update_resume_keeps_other_config_keys(client, headers, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "config.json").write_text('{"resume": "https://old", "title": "Mine"}', encoding="utf-8")

    client.put("/api/admin/resume", json={"resume": "https://new.example.com"}, headers=headers)

    site = client.get("/api/config").json()
    assert site["resume"] == "https://new.example.com"
    assert site["title"] == "Mine"
    assert site["email"] == DEFAULT_SITE_CONFIG["email"]


def test_site_config_defaults(client):
    assert client.get("/api/config").json() == DEFAULT_SITE_CONFIG


def test_storage_failure_is_500(auth_config, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    app.dependency_overrides[get_auth_config] = lambda: auth_config
    app.dependency_overrides[get_storage_config] = lambda: StorageConfig(
        data_dirs=(blocker / "data",)
    )
    try:
        c = TestClient(app)
        token = c.post("/api/admin/auth", json={"password": ADMIN_PASSWORD}).json()["token"]
        res = c.put(
            "/api/admin/resume",
            json={"resume": "https://x.example.com"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert res.status_code == 500
        assert res.json() == {"ok": False, "error": "Failed to save data"}
    finally:
        app.dependency_overrides.clear()


def test_healthz_lists_tiers(client, data_dir):
    res = client.get("/healthz")
    assert res.json() == {"ok": True, "storage": [f"fs:{data_dir}"]}
