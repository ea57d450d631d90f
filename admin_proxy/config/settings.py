"""Settings loader with environment variable, .env and Docker secrets integration."""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from admin_proxy.core.gotrue import REQUEST_TIMEOUT

DEFAULT_PORT = 4000


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                print(f"[settings] ✓ Loaded {secret_name} from /run/secrets")
                return secret_value
        except OSError as e:
            print(f"[settings] ✗ Failed to read /run/secrets/{secret_name}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


@dataclass
class AppConfig:
    """Application configuration container."""
    # Identity provider
    provider_url: str
    service_role_key: str
    request_timeout: float = REQUEST_TIMEOUT

    # Server
    port: int = DEFAULT_PORT
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _parse_port(raw: Optional[str]) -> int:
    """Parse PORT, falling back to the default when unset or malformed."""
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        print(f"[settings] WARNING: Ignoring invalid PORT={raw!r}; using {DEFAULT_PORT}")
        return DEFAULT_PORT


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        print(f"[settings] WARNING: Ignoring invalid GOTRUE_REQUEST_TIMEOUT={raw!r}")
        return REQUEST_TIMEOUT


def load_settings(dotenv_path: Optional[str] = None) -> AppConfig:
    """Load application settings from .env, environment and /run/secrets.

    Outside production a local .env file is read first; variables already
    present in the environment win.

    Args:
        dotenv_path: Explicit .env location (defaults to searching upwards from cwd)

    Returns:
        Populated AppConfig

    Raises:
        RuntimeError: If the provider URL or service role key is missing
    """
    environment = os.environ.get("APP_ENV", "development").strip().lower()
    if environment != "production":
        load_dotenv(dotenv_path)
        # .env may set APP_ENV itself
        environment = os.environ.get("APP_ENV", environment).strip().lower()

    provider_url = os.environ.get("SUPABASE_URL", "").strip()
    service_role_key = _load_secret_from_file("service_role_key", "SERVICE_ROLE_KEY") or ""

    if not provider_url or not service_role_key:
        raise RuntimeError("Missing SUPABASE_URL or SERVICE_ROLE_KEY environment variable.")

    config = AppConfig(
        provider_url=provider_url,
        service_role_key=service_role_key,
        request_timeout=_parse_timeout(os.environ.get("GOTRUE_REQUEST_TIMEOUT")),
        port=_parse_port(os.environ.get("PORT")),
        environment=environment,
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )

    print(f"[settings] Env={config.environment}; provider={config.provider_url}; port={config.port}")
    return config
