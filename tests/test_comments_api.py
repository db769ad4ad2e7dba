from datetime import datetime, timedelta

from toolshub.extensions import db
from toolshub.models.comment import Comment
from toolshub.models.tool import Tool


def test_add_and_list_comments(client, make_tool):
    tool = make_tool()

    response = client.post(
        f"/api/tools/{tool['slug']}/comments",
        json={"name": "  Ana ", "comment": "Works great"},
    )

    assert response.status_code == 201
    comment = response.get_json()["data"]
    assert comment["name"] == "Ana"
    assert comment["toolSlug"] == tool["slug"]
    assert comment["timestamp"]

    listed = client.get(f"/api/tools/{tool['slug']}/comments").get_json()["data"]
    assert [c["comment"] for c in listed] == ["Works great"]

    detail = client.get(f"/api/tools/{tool['slug']}").get_json()["data"]
    assert detail["commentCount"] == 1
    assert detail["comments"][0]["id"] == comment["id"]


def test_add_comment_touches_tool(client, make_tool):
    tool = make_tool()

    client.post(f"/api/tools/{tool['slug']}/comments", json={"name": "Ana", "comment": "Nice"})

    updated = client.get(f"/api/tools/{tool['slug']}").get_json()["data"]
    assert updated["updatedAt"] > tool["updatedAt"]


def test_add_comment_validation(client, make_tool):
    tool = make_tool()

    response = client.post(f"/api/tools/{tool['slug']}/comments", json={"name": "", "comment": "x" * 2001})

    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error.startswith("Validation failed: ")
    assert "name is required" in error
    assert Comment.query.count() == 0


def test_comments_for_unknown_tool(client):
    assert client.get("/api/tools/missing/comments").status_code == 404

    response = client.post("/api/tools/missing/comments", json={"name": "Ana", "comment": "Hi"})

    assert response.status_code == 404
    assert response.get_json()["error"] == "Tool not found"


def test_all_comments_newest_first(client, make_tool):
    first = make_tool(name="First")
    second = make_tool(name="Second")
    base = datetime(2024, 3, 1)
    db.session.add_all([
        Comment(first["slug"], "A", "oldest", timestamp=base),
        Comment(second["slug"], "B", "newest", timestamp=base + timedelta(days=2)),
        Comment(first["slug"], "C", "middle", timestamp=base + timedelta(days=1)),
    ])
    db.session.commit()

    response = client.get("/api/comments")

    assert response.status_code == 200
    assert [c["comment"] for c in response.get_json()["data"]] == ["newest", "middle", "oldest"]

    per_tool = client.get(f"/api/tools/{first['slug']}/comments").get_json()["data"]
    assert [c["comment"] for c in per_tool] == ["oldest", "middle"]


def test_deleting_tool_removes_its_comments(client, make_tool):
    tool = make_tool()
    client.post(f"/api/tools/{tool['slug']}/comments", json={"name": "Ana", "comment": "Hi"})

    db.session.delete(Tool.query.filter_by(slug=tool["slug"]).one())
    db.session.commit()

    assert Comment.query.count() == 0
