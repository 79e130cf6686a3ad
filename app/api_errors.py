"""
Shared JSON error handling for the registry blueprints.
"""
import logging

from flask import Blueprint, jsonify
from pydantic import ValidationError

from tag_registry.errors import TagRegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(bp: Blueprint) -> None:
    """Map registry errors to JSON responses on a blueprint."""

    @bp.errorhandler(TagRegistryError)
    def handle_registry_error(exc: TagRegistryError):
        logger.info(f"{bp.name}: {exc.code}: {exc.message}")
        return jsonify(exc.to_dict()), exc.http_status

    @bp.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({
            "error": "invalid_input",
            "message": "Invalid request payload",
            "details": {"errors": exc.errors(include_url=False, include_context=False)}
        }), 400
