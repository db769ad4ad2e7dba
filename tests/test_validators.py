import pytest

from toolshub.utils.validators import (
    CategoryValidator,
    CommentValidator,
    ToolValidator,
    URLValidator,
)


@pytest.fixture
def tool_data(tool_payload):
    return dict(tool_payload)


def test_valid_tool_passes(tool_data):
    assert ToolValidator.validate(tool_data) == (True, [])


def test_missing_website_link_rejected(tool_data):
    del tool_data["websiteLink"]

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert "websiteLink is required" in errors


def test_zero_rating_and_not_free_accepted(tool_data):
    tool_data.update(rating=0, isFree=False)

    assert ToolValidator.validate(tool_data) == (True, [])


@pytest.mark.parametrize("rating", [5.1, -1])
def test_rating_out_of_range_rejected(tool_data, rating):
    tool_data["rating"] = rating

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert "rating must be between 0 and 5" in errors


@pytest.mark.parametrize("rating", ["4", True, [4]])
def test_rating_must_be_a_number(tool_data, rating):
    tool_data["rating"] = rating

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert "rating must be a number" in errors


def test_not_a_url_rejected(tool_data):
    tool_data["websiteLink"] = "not-a-url"

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert any(e.startswith("websiteLink") for e in errors)


def test_http_website_link_rejected(tool_data):
    tool_data["websiteLink"] = "http://example.com"

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert "websiteLink: URL must start with https://" in errors


def test_is_free_must_be_boolean(tool_data):
    tool_data["isFree"] = "yes"

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert "isFree must be a boolean" in errors


def test_reports_every_failure_at_once():
    is_valid, errors = ToolValidator.validate({
        "name": "   ",
        "rating": 7,
        "isFree": None,
        "websiteLink": "ftp://files.example.com",
        "summary": "x" * 161,
    })

    assert not is_valid
    for expected in (
        "name is required",
        "categorySlug is required",
        "isFree is required",
        "description is required",
        "rating must be between 0 and 5",
        "summary cannot exceed 160 characters",
    ):
        assert expected in errors
    assert any(e.startswith("websiteLink") for e in errors)


def test_optional_fields_may_be_empty(tool_data):
    tool_data.update(image="", tags=[], usageSteps=[])

    assert ToolValidator.validate(tool_data) == (True, [])


def test_explicit_slug_must_be_slug_shaped(tool_data):
    tool_data["slug"] = "Not A Slug"

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert any(e.startswith("slug must contain") for e in errors)


def test_non_dict_body_rejected():
    assert ToolValidator.validate(["not", "a", "dict"]) == (False, ["Request body must be a JSON object"])


def test_category_validation(category_payload):
    assert CategoryValidator.validate(category_payload) == (True, [])

    bad = dict(category_payload, iconName="Rocket", description="d" * 201)
    is_valid, errors = CategoryValidator.validate(bad)

    assert not is_valid
    assert any(e.startswith("iconName must be one of") for e in errors)
    assert "description cannot exceed 200 characters" in errors


def test_category_required_fields():
    is_valid, errors = CategoryValidator.validate({})

    assert not is_valid
    assert errors == [
        "name is required",
        "slug is required",
        "description is required",
        "iconName is required",
    ]


def test_comment_validation():
    assert CommentValidator.validate({"name": "Ana", "comment": "Great tool"}) == (True, [])

    is_valid, errors = CommentValidator.validate({"name": "", "comment": None})
    assert not is_valid
    assert errors == ["name is required", "comment is required"]


@pytest.mark.parametrize("url, ok", [
    ("https://example.com/tool", True),
    ("http://example.com", True),
    ("https://", False),
    ("javascript:alert(1)", False),
    ("", False),
])
def test_url_validator(url, ok):
    assert URLValidator.validate(url)[0] is ok


@pytest.mark.parametrize("field", ["slug", "id", "categorySlug"])
def test_tool_slug_fields_limited_to_column_width(tool_data, field):
    tool_data[field] = "a" * 121

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert f"{field} cannot exceed 120 characters" in errors


def test_tool_slug_at_column_width_accepted(tool_data):
    tool_data["slug"] = "a" * 120

    assert ToolValidator.validate(tool_data) == (True, [])


@pytest.mark.parametrize("field", ["websiteLink", "image"])
def test_tool_urls_limited_to_column_width(tool_data, field):
    tool_data[field] = "https://example.com/" + "p" * 500

    is_valid, errors = ToolValidator.validate(tool_data)

    assert not is_valid
    assert f"{field}: URL is too long (max 512 characters)" in errors


def test_category_slug_and_image_limited_to_column_width(category_payload):
    category_payload.update(slug="c" * 300, imageURL="https://example.com/" + "i" * 600)

    is_valid, errors = CategoryValidator.validate(category_payload)

    assert not is_valid
    assert "slug cannot exceed 120 characters" in errors
    assert "imageURL: URL is too long (max 512 characters)" in errors


def test_url_validator_custom_max_length():
    url = "https://example.com/" + "x" * 30

    assert URLValidator.validate(url)[0] is True
    assert URLValidator.validate(url, max_length=40)[2] == "URL is too long (max 40 characters)"
