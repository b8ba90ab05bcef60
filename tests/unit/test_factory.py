"""Unit tests for configuration and backend selection."""

from __future__ import annotations

import pytest

from ec2_double.backends.aws.launch_templates import EC2LaunchTemplateStore
from ec2_double.backends.factory import build_launch_template_store
from ec2_double.backends.mock.launch_templates import LaunchTemplateRegistry
from ec2_double.shared.config import get_env


def test_get_env_requires_value_without_default(monkeypatch):
    monkeypatch.delenv("EC2_DOUBLE_MISSING", raising=False)

    with pytest.raises(RuntimeError):
        get_env("EC2_DOUBLE_MISSING")
    assert get_env("EC2_DOUBLE_MISSING", "fallback") == "fallback"


def test_factory_defaults_to_fresh_mock_registry(monkeypatch):
    monkeypatch.delenv("EC2_DOUBLE_BACKEND", raising=False)

    first = build_launch_template_store()
    second = build_launch_template_store()

    assert isinstance(first, LaunchTemplateRegistry)
    assert first is not second


def test_factory_builds_aws_store(monkeypatch):
    monkeypatch.setenv("EC2_DOUBLE_BACKEND", "aws")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")

    store = build_launch_template_store()

    assert isinstance(store, EC2LaunchTemplateStore)
    assert store._ec2.meta.endpoint_url == "http://localhost:4566"
    assert store._ec2.meta.region_name == "us-east-1"


def test_factory_rejects_unknown_backend(monkeypatch):
    monkeypatch.setenv("EC2_DOUBLE_BACKEND", "gcp")

    with pytest.raises(ValueError):
        build_launch_template_store()
