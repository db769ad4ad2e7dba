# toolshub/routes/seed.py

import logging

from flask import Blueprint, current_app

from toolshub.errors import ForbiddenError
from toolshub.services.seed_service import SeedService
from toolshub.utils.auth import admin_required

seed_bp = Blueprint("seed", __name__)
logger = logging.getLogger(__name__)


@seed_bp.route("/database", methods=["POST"])
@admin_required
def seed_database():
    if not current_app.config.get("SEED_ENABLED"):
        logger.warning("Seed request rejected: SEED_ENABLED is off")
        raise ForbiddenError("Database seeding is disabled")

    counts = SeedService.seed_database()
    return current_app.api_response.success(data=counts, status=201)
