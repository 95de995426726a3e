from db.crud.tutorials import count_by_difficulty


def test_level_counts(client, catalog):
    res = client.get("/api/levels")
    assert res.json()["data"] == {"easy": 1, "medium": 3, "hard": 1}


def test_level_counts_empty_site(db):
    assert count_by_difficulty(db) == {"easy": 0, "medium": 0, "hard": 0}


def test_level_page(client, catalog):
    body = client.get("/api/levels/medium").json()

    assert body["total"] == 3
    assert [t["slug"] for t in body["data"]] == ["number-of-islands", "container-with-most-water", "three-sum"]


def test_unknown_level(client):
    res = client.get("/api/levels/impossible")
    assert res.status_code == 404
    assert res.json() == {"error": "level not found"}


def test_search_covers_problem_statement(client, catalog):
    res = client.get("/api/search", params={"q": "beginword"})
    assert [t["slug"] for t in res.json()["data"]] == ["word-ladder"]


def test_search_orders_by_views(client, catalog):
    res = client.get("/api/search", params={"q": "sum"})
    assert [t["slug"] for t in res.json()["data"]] == ["two-sum", "three-sum"]


def test_search_blank_query(client, catalog):
    assert client.get("/api/search", params={"q": "   "}).json() == {"data": []}


def test_home(client, catalog):
    data = client.get("/api/home").json()["data"]

    assert [t["slug"] for t in data["featured"]] == ["two-sum", "three-sum", "word-ladder"]
    assert [t["slug"] for t in data["recent"]][:2] == ["number-of-islands", "word-ladder"]
    assert len(data["recent"]) == 5
    assert [c["slug"] for c in data["categories"]] == ["arrays", "graphs"]
    assert data["stats"] == {"totalProblems": 5, "totalCategories": 2, "totalTopics": 3}


def test_admin_requires_key(client, api_key):
    assert client.get("/api/admin/stats").status_code == 401
    assert client.get("/api/admin/problems").status_code == 401


def test_admin_stats(client, headers, catalog):
    data = client.get("/api/admin/stats", headers=headers).json()["data"]

    assert data["totalTutorials"] == 6
    assert data["publishedTutorials"] == 5
    assert data["totalCategories"] == 2
    assert data["totalTags"] == 3
    assert data["totalViews"] == 90
    assert len(data["recent"]) == 5


def test_admin_problems_include_drafts(client, headers, catalog):
    body = client.get("/api/admin/problems", params={"q": "draft"}, headers=headers).json()

    assert body["total"] == 1
    assert body["pageSize"] == 20
    assert body["data"][0]["status"] == "draft"
    assert body["data"][0]["category"]["slug"] == "arrays"
