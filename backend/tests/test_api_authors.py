from api.routes import authors as authors_router
from domain.errors import StorageError


def _create_author(client, name):
    resp = client.post("/api/author", json={"name": name})
    assert resp.status_code == 200
    return resp.json()["author"]


def test_create_author_then_list_includes_it(client):
    resp = client.post("/api/author", json={"name": "Arthur Conan Doyle"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["author"]["name"] == "Arthur Conan Doyle"
    assert isinstance(data["author"]["id"], int)

    resp = client.post("/api/author", json={})
    assert resp.status_code == 403
    assert resp.json()["success"] is False
    assert "name" in resp.json()["message"]

    resp = client.get("/api/author")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert [a["name"] for a in data["authors"]] == ["Arthur Conan Doyle"]


def test_list_authors_empty(client):
    resp = client.get("/api/author")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "authors": []}


def test_create_author_rejects_blank_and_wrong_type(client):
    assert client.post("/api/author", json={"name": "   "}).status_code == 403
    resp = client.post("/api/author", json={"name": 12})
    assert resp.status_code == 403
    assert resp.json()["success"] is False
    assert client.get("/api/author").json()["authors"] == []


def test_get_author_includes_books(client):
    author = _create_author(client, "Jules Verne")
    client.post("/api/book", json={"title": "Around the World in Eighty Days", "authorid": author["id"]})

    resp = client.get(f"/api/author/{author['id']}")
    assert resp.status_code == 200
    data = resp.json()["author"]
    assert data["name"] == "Jules Verne"
    assert data["book_count"] == 1
    assert [b["title"] for b in data["books"]] == ["Around the World in Eighty Days"]


def test_get_unknown_author_is_404(client):
    resp = client.get("/api/author/12345")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_update_author(client):
    author = _create_author(client, "Samuel Clemens")

    resp = client.put(f"/api/author/{author['id']}", json={"name": "Mark Twain"})
    assert resp.status_code == 200
    assert resp.json()["author"]["name"] == "Mark Twain"

    resp = client.put(f"/api/author/{author['id']}", json={"name": ""})
    assert resp.status_code == 403
    assert client.get(f"/api/author/{author['id']}").json()["author"]["name"] == "Mark Twain"

    assert client.put("/api/author/999", json={"name": "Ghost"}).status_code == 404


def test_delete_author(client):
    author = _create_author(client, "Temporary")

    resp = client.delete(f"/api/author/{author['id']}")
    assert resp.status_code == 200
    assert resp.json()["success"] is True

    assert client.get(f"/api/author/{author['id']}").status_code == 404
    assert client.delete(f"/api/author/{author['id']}").status_code == 404


def test_delete_author_with_books_is_refused(client):
    author = _create_author(client, "Bram Stoker")
    client.post("/api/book", json={"title": "Dracula", "authorid": author["id"]})

    resp = client.delete(f"/api/author/{author['id']}")
    assert resp.status_code == 409
    assert resp.json()["success"] is False
    assert client.get(f"/api/author/{author['id']}").status_code == 200


def test_storage_error_becomes_500_envelope(client, monkeypatch):
    def broken(session):
        raise StorageError("list_authors failed: database is locked")

    monkeypatch.setattr(authors_router.authors_repo, "list_authors", broken)

    resp = client.get("/api/author")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "list_authors failed: database is locked"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_out_of_range_author_id_is_403(client):
    for path in (f"/api/author/{2**70}", "/api/author/0"):
        resp = client.get(path)
        assert resp.status_code == 403
        assert resp.json()["success"] is False

    resp = client.put(f"/api/author/{2**70}", json={"name": "Too Big"})
    assert resp.status_code == 403
    assert client.delete(f"/api/author/{2**70}").status_code == 403


def test_wrong_method_and_unknown_path_use_envelope(client):
    resp = client.patch("/api/author/1", json={"name": "Patched"})
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "message": "Method Not Allowed"}

    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Not Found"}


def test_unexpected_error_becomes_500_envelope(store, monkeypatch):
    from fastapi.testclient import TestClient

    from api.main import create_app

    def broken(session):
        raise OverflowError("Python int too large to convert to SQLite INTEGER")

    monkeypatch.setattr(authors_router.authors_repo, "list_authors", broken)
    client = TestClient(create_app(store), raise_server_exceptions=False)

    resp = client.get("/api/author")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"success": False, "message": "Internal server error"}
