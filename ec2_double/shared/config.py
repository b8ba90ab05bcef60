"""Configuration helpers — read from environment variables."""

from __future__ import annotations

import os


def get_env(name: str, default: str | None = None) -> str:
    """Get an environment variable, raising if missing and no default."""
    value = os.environ.get(name, default)
    if value is None:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


# Backend selection and boto3 overrides (read lazily so tests can monkeypatch)
BACKEND = lambda: get_env("EC2_DOUBLE_BACKEND", "mock")
AWS_ENDPOINT_URL = lambda: get_env("AWS_ENDPOINT_URL", "")
AWS_REGION = lambda: get_env("AWS_REGION", "")
