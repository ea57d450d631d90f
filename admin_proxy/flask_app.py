"""Flask application factory and bootstrap.

This module provides the create_app() factory function for initializing
the Flask application with all blueprints, middleware, and configuration.

Gunicorn:
    gunicorn -c gunicorn.conf.py "admin_proxy.flask_app:create_app()"
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

from flask import Flask
from flask_cors import CORS

from admin_proxy.config import AppConfig, load_settings
from admin_proxy.core.gotrue import GoTrueClient, UserService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application Factory
# ─────────────────────────────────────────────────────────────────────────────
def create_app(config: Optional[AppConfig] = None, user_service: Optional[UserService] = None) -> Flask:
    """Create and configure Flask application.

    Args:
        config: Settings; loaded from the environment when omitted
        user_service: Pre-built service (tests pass one wrapping a fake client)

    Returns:
        Configured Flask app

    Raises:
        RuntimeError: If required settings are missing
    """
    cfg = config or load_settings()

    app = Flask(__name__)
    app.config["APP_CONFIG"] = cfg

    _configure_logging(cfg)

    if user_service is None:
        client = GoTrueClient(cfg.provider_url, cfg.service_role_key, timeout=cfg.request_timeout)
        user_service = UserService(client)
    app.config["USER_SERVICE"] = user_service

    # Admin panel is served from another origin; accept any
    CORS(app)

    from admin_proxy.api import errors, health, users

    app.register_blueprint(health.bp)
    app.register_blueprint(users.bp)

    errors.register_error_handlers(app)

    print(f"[flask_app] Env={cfg.environment}; provider={cfg.provider_url}")
    return app


def _configure_logging(cfg: AppConfig) -> None:
    """Set root log level; handlers are only added when none exist (gunicorn installs its own)."""
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        print(f"[flask_app] WARNING: Unknown LOG_LEVEL={cfg.log_level!r}; using INFO")
        level = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    root.setLevel(level)


# ─────────────────────────────────────────────────────────────────────────────
# Development Server Entry Point
# ─────────────────────────────────────────────────────────────────────────────
def main() -> None:
    """Load settings, then serve; exit 1 before binding if settings are incomplete."""
    try:
        cfg = load_settings()
    except RuntimeError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("%s", exc)
        sys.exit(1)

    app = create_app(cfg)
    logger.info("Super Admin API running on port %d", cfg.port)
    logger.info("Supabase URL: %s", cfg.provider_url)
    app.run(host="0.0.0.0", port=cfg.port, threaded=True, debug=False)


if __name__ == "__main__":
    main()
