"""Liveness and readiness checks."""
from flask import Blueprint, current_app

bp = Blueprint("health", __name__)


@bp.route("/health")
def health_check():
    """Liveness check; never contacts the identity provider."""
    return ("ok", 200, {"Content-Type": "text/plain"})


@bp.route("/ready")
def readiness_check():
    """Ready once a provider URL, service key and user service are in place."""
    cfg = current_app.config.get("APP_CONFIG")
    configured = bool(cfg and cfg.provider_url and cfg.service_role_key)
    if not configured or current_app.config.get("USER_SERVICE") is None:
        return ("provider not configured", 503, {"Content-Type": "text/plain"})
    return ("ready", 200, {"Content-Type": "text/plain"})
