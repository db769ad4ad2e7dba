# toolshub/routes/categories.py

import logging

from flask import Blueprint, request, current_app

from toolshub.extensions import limiter
from toolshub.services.category_service import CategoryService
from toolshub.utils.auth import admin_required
from toolshub.utils.base_url import get_public_base_url
from toolshub.utils.helpers import get_json_body

categories_bp = Blueprint("categories", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


@categories_bp.route("", methods=["GET"])
def get_categories():
    categories = CategoryService.list_categories(
        base_url=get_public_base_url(),
        search=request.args.get("q"),
    )
    return api_response().success(data=categories)


@categories_bp.route("/add", methods=["POST"])
@limiter.limit("30 per minute")
@admin_required
def add_category():
    category = CategoryService.create_category(get_json_body())
    return api_response().success(data=category.to_dict(base_url=get_public_base_url()), status=201)


@categories_bp.route("/<slug>", methods=["GET"])
def get_category(slug: str):
    category = CategoryService.get_category(slug)

    if not category:
        return api_response().not_found("Category not found")

    return api_response().success(data=category.to_dict(base_url=get_public_base_url()))


@categories_bp.route("/<slug>/tools", methods=["GET"])
def get_category_tools(slug: str):
    tools = CategoryService.get_tools_for_category(slug)

    if tools is None:
        return api_response().not_found("Category not found")

    base_url = get_public_base_url()
    return api_response().success(data=[t.to_dict(base_url=base_url, include_comments=False) for t in tools])
