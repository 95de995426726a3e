from db.models.categories import Category
from db.models.tutorials import Tutorial


def test_list_in_display_order(client, make_category):
    make_category("Graphs", "graphs", display_order=2)
    make_category("Arrays", "arrays", display_order=1)

    res = client.get("/api/categories")

    assert res.status_code == 200
    assert [c["slug"] for c in res.json()["data"]] == ["arrays", "graphs"]


def test_details_lists_published_only(client, catalog):
    res = client.get("/api/categories/arrays")
    data = res.json()["data"]

    assert data["category"]["name"] == "Arrays & Strings"
    assert [t["slug"] for t in data["tutorials"]] == ["container-with-most-water", "three-sum", "two-sum"]


def test_details_unknown(client):
    res = client.get("/api/categories/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "category not found"}


def test_create_generates_slug(client, headers):
    res = client.post("/api/categories", json={"name": "Arrays & Strings", "icon": "📦"}, headers=headers)

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["slug"] == "arrays-strings"
    assert data["tutorial_count"] == 0
    assert data["display_order"] == 0


def test_create_requires_name(client, headers):
    res = client.post("/api/categories", json={"slug": "x"}, headers=headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields (name)"}


def test_create_rejects_name_without_slug_characters(client, db, headers):
    res = client.post("/api/categories", json={"name": "???"}, headers=headers)

    assert res.status_code == 400
    assert "slug" in res.json()["error"]
    assert db.query(Category).count() == 0


def test_update_rejects_blank_name(client, headers, make_category):
    graphs = make_category("Graphs", "graphs")

    res = client.put(f"/api/categories/{graphs.id}", json={"name": ""}, headers=headers)
    assert res.status_code == 400


def test_create_requires_key(client, api_key):
    assert client.post("/api/categories", json={"name": "Graphs"}).status_code == 401


def test_duplicate_slug_is_rejected(client, headers, make_category):
    make_category("Graphs", "graphs")
    res = client.post("/api/categories", json={"name": "Graphs"}, headers=headers)
    assert res.status_code == 500


def test_update(client, headers, make_category):
    graphs = make_category("Graphs", "graphs")

    res = client.put(f"/api/categories/{graphs.id}", json={"description": "BFS, DFS and friends"}, headers=headers)

    assert res.status_code == 200
    assert res.json()["data"]["description"] == "BFS, DFS and friends"
    assert res.json()["data"]["name"] == "Graphs"


def test_update_unknown(client, headers):
    assert client.put("/api/categories/999", json={"name": "x"}, headers=headers).status_code == 404


def test_delete_keeps_tutorials(client, db, headers, catalog):
    res = client.delete(f"/api/categories/{catalog['graphs'].id}", headers=headers)

    assert res.status_code == 200
    assert res.json() == {"message": "Deleted successfully"}
    assert client.get("/api/categories/graphs").status_code == 404

    ladder = client.get("/api/problems/word-ladder").json()["data"]
    assert ladder["category"] is None
    db.expire_all()
    assert db.query(Tutorial).filter(Tutorial.slug == "word-ladder").one().category_id is None
