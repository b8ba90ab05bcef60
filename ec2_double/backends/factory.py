"""Build a launch template store from environment configuration."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def build_launch_template_store():
    """Return a fresh store for the backend named by EC2_DOUBLE_BACKEND."""
    from ec2_double.shared.config import AWS_ENDPOINT_URL, AWS_REGION, BACKEND

    backend = BACKEND().strip().lower()

    if backend == "mock":
        from ec2_double.backends.mock.launch_templates import LaunchTemplateRegistry

        return LaunchTemplateRegistry()

    if backend == "aws":
        from ec2_double.backends.aws.launch_templates import EC2LaunchTemplateStore

        return EC2LaunchTemplateStore(
            endpoint_url=AWS_ENDPOINT_URL() or None,
            region_name=AWS_REGION() or None,
        )

    logger.warning("Unknown launch template backend: %s", backend)
    raise ValueError(f"Unsupported backend: {backend}")
