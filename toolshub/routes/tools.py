# toolshub/routes/tools.py

import logging

from flask import Blueprint, request, current_app

from toolshub.extensions import limiter
from toolshub.services.comment_service import CommentService
from toolshub.services.tool_service import ToolService
from toolshub.utils.auth import admin_required
from toolshub.utils.base_url import get_public_base_url
from toolshub.utils.helpers import get_json_body

tools_bp = Blueprint("tools", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


@tools_bp.route("", methods=["GET"])
def get_tools():
    tools = ToolService.list_tools(
        base_url=get_public_base_url(),
        category_slug=request.args.get("category"),
        search=request.args.get("q"),
    )
    return api_response().success(data=tools)


@tools_bp.route("/featured", methods=["GET"])
def get_featured_tools():
    return api_response().success(data=ToolService.get_featured_tools(base_url=get_public_base_url()))


@tools_bp.route("/add", methods=["POST"])
@limiter.limit("30 per minute")
@admin_required
def add_tool():
    tool = ToolService.create_tool(get_json_body())
    return api_response().success(data=tool.to_dict(base_url=get_public_base_url()), status=201)


@tools_bp.route("/<slug>", methods=["GET"])
def get_tool(slug: str):
    tool = ToolService.get_tool(slug)

    if not tool:
        return api_response().not_found("Tool not found")

    return api_response().success(data=tool.to_dict(base_url=get_public_base_url()))


@tools_bp.route("/<slug>/related", methods=["GET"])
def get_related_tools(slug: str):
    tool = ToolService.get_tool(slug)

    if not tool:
        return api_response().not_found("Tool not found")

    return api_response().success(data=ToolService.get_related_tools(tool, base_url=get_public_base_url()))


@tools_bp.route("/<slug>/comments", methods=["GET"])
def get_tool_comments(slug: str):
    tool = ToolService.get_tool(slug)

    if not tool:
        return api_response().not_found("Tool not found")

    comments = CommentService.list_for_tool(tool)
    return api_response().success(data=[c.to_dict() for c in comments])


@tools_bp.route("/<slug>/comments", methods=["POST"])
@limiter.limit("20 per minute")
def add_tool_comment(slug: str):
    tool = ToolService.get_tool(slug)

    if not tool:
        return api_response().not_found("Tool not found")

    comment = CommentService.add_comment(tool, get_json_body())
    return api_response().success(data=comment.to_dict(), status=201)
