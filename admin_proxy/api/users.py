"""User administration endpoints proxied to the GoTrue admin API.

Routes:
    GET  /users                    - one page of users (100 per page)
    POST /reset-password           - set password by user id
    POST /reset-password-by-email  - set password by email, returns the user
    POST /manual-password-reset    - set password by email, status-only body

The two email routes share one find-and-update path and differ only in
their response envelope.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from flask import Blueprint, Response, current_app, jsonify, request

from admin_proxy.core.gotrue import GoTrueAPIError, UserNotFoundError, UserService
from admin_proxy.core.validators import parse_page, require_fields

bp = Blueprint("users", __name__)

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


# ─────────────────────────────────────────────────────────────────────────────
# Response Envelopes
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Envelope:
    """Wire shape of a route's success and error bodies."""
    error: Callable[[str, int], tuple[Response, int]]
    success: Callable[[dict], Response]


def _error_body(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _status_body(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"success": False, "message": message}), status


# {success, user} / {error}
USER_ENVELOPE = Envelope(
    error=_error_body,
    success=lambda user: jsonify({"success": True, "user": user}),
)

# {success, message?}
STATUS_ENVELOPE = Envelope(
    error=_status_body,
    success=lambda user: jsonify({"success": True}),
)


# ─────────────────────────────────────────────────────────────────────────────
# Helper Functions
# ─────────────────────────────────────────────────────────────────────────────
def _user_service() -> UserService:
    return current_app.config["USER_SERVICE"]


def _json_body() -> dict:
    """Return the request body as a dict; anything else counts as empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _find_and_update(envelope: Envelope, source: str) -> tuple[Response, int] | Response:
    """Validate, locate the user by email, set the password, shape the response.

    Args:
        envelope: Response shape for this route
        source: Label used in log lines

    Returns:
        Flask response (with status code on errors)
    """
    payload = _json_body()
    logger.info("%s request: email=%s", source, payload.get("email"))

    try:
        email, new_password = require_fields(payload, "email", "newPassword")
    except ValueError as exc:
        return envelope.error(str(exc), 400)

    try:
        user = _user_service().reset_password_by_email(email, new_password)
    except UserNotFoundError:
        logger.warning("User not found for email: %s", email)
        return envelope.error(USER_NOT_FOUND, 404)
    except GoTrueAPIError as exc:
        logger.error("%s failed: %s", source, exc)
        return envelope.error(exc.message, 400)

    logger.info("Password updated for user: %s", email)
    return envelope.success(user)


# ─────────────────────────────────────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────────────────────────────────────
@bp.route("/users", methods=["GET"])
def list_users():
    """Return one page of users; `page` defaults to 1."""
    page = parse_page(request.args.get("page"))
    try:
        users = _user_service().list_users(page)
    except GoTrueAPIError as exc:
        logger.error("List users failed: %s", exc)
        return _error_body(exc.message, 400)
    return jsonify({"users": users})


@bp.route("/reset-password", methods=["POST"])
def reset_password():
    """Set a new password for the user identified by `userId`."""
    try:
        user_id, new_password = require_fields(_json_body(), "userId", "newPassword")
    except ValueError as exc:
        return _error_body(str(exc), 400)

    try:
        user = _user_service().update_password(user_id, new_password)
    except GoTrueAPIError as exc:
        logger.error("Password reset failed for user %s: %s", user_id, exc)
        return _error_body(exc.message, 400)

    logger.info("Password updated for user id: %s", user_id)
    return USER_ENVELOPE.success(user)


@bp.route("/reset-password-by-email", methods=["POST"])
def reset_password_by_email():
    """Automated reset: returns `{success, user}`."""
    return _find_and_update(USER_ENVELOPE, "Password reset by email")


@bp.route("/manual-password-reset", methods=["POST"])
def manual_password_reset():
    """Frontend reset: returns `{success}` without the user record."""
    return _find_and_update(STATUS_ENVELOPE, "Manual password reset")
