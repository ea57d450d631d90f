"""Gunicorn configuration file.

Run with:
    gunicorn -c gunicorn.conf.py "admin_proxy.flask_app:create_app()"

Settings are validated in on_starting, which runs before gunicorn creates
its listening sockets, so a missing SUPABASE_URL or SERVICE_ROLE_KEY stops
the master without ever binding the port.
"""
import os
import sys

bind = f"0.0.0.0:{os.environ.get('PORT') or 4000}"
workers = int(os.environ.get("GUNICORN_WORKERS", "2"))
# Threads let one worker keep accepting requests while others wait on GoTrue
worker_class = "gthread"
threads = int(os.environ.get("GUNICORN_THREADS", "8"))
accesslog = "-"
errorlog = "-"


def on_starting(server):
    """Fail fast on incomplete configuration."""
    from admin_proxy.config import load_settings

    try:
        cfg = load_settings()
    except RuntimeError as exc:
        server.log.error(str(exc))
        sys.exit(1)

    server.log.info(f"Super Admin API running on port {cfg.port}")
    server.log.info(f"Supabase URL: {cfg.provider_url}")
