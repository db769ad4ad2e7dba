from toolshub.models.category import Category
from toolshub.models.comment import Comment
from toolshub.models.tool import Tool


def test_seed_database(client):
    response = client.post("/api/seed/database")

    assert response.status_code == 201
    assert response.get_json()["data"] == {
        "categoriesAdded": 6,
        "toolsAdded": 6,
        "commentsAdded": 2,
    }
    assert Category.query.count() == 6
    assert Tool.query.count() == 6
    assert Comment.query.count() == 2


def test_seed_replaces_existing_data(client, make_tool):
    make_tool(name="Leftover Tool")

    client.post("/api/seed/database")
    client.post("/api/seed/database")

    assert Tool.query.filter_by(slug="leftover-tool").first() is None
    assert Tool.query.count() == 6


def test_seeded_data_is_served(client):
    client.post("/api/seed/database")

    tools = client.get("/api/categories/pdf-tools/tools").get_json()["data"]
    assert [t["slug"] for t in tools] == ["pdf-to-word-converter"]

    featured = client.get("/api/tools/featured").get_json()["data"]
    assert len(featured) == 6


def test_seed_disabled(app, client):
    app.config["SEED_ENABLED"] = False

    response = client.post("/api/seed/database")

    assert response.status_code == 403
    assert response.get_json()["error"] == "Database seeding is disabled"
