"""Core application routes."""
from __future__ import annotations

from flask import Blueprint, jsonify

core_bp = Blueprint("core", __name__)


@core_bp.get("/", provide_automatic_options=False)
def index():
    """Welcome message for the API root."""
    return jsonify(message="Welcome to the Express API server"), 200


@core_bp.get("/health", provide_automatic_options=False)
def healthcheck():
    """Simple health endpoint to verify the service is running."""
    return jsonify(status="ok"), 200
