"""Abstract interfaces for ec2_double backends.

Code under test depends only on these protocols, never on whether it talks to
the in-memory registry or to boto3. Requests and responses are the plain
dicts boto3 uses for the EC2 API (PascalCase keys).
"""

from __future__ import annotations

from typing import Protocol


class TagBinder(Protocol):
    """Records tags against a resource identifier."""

    def add_tags(self, resource_id: str, *tags: dict) -> None:
        """Attach {"Key", "Value"} tags to a resource, overwriting existing keys."""
        ...


class LaunchTemplateStore(Protocol):
    """Create, list, list-versions and delete for EC2 launch templates."""

    def create_launch_template(self, request: dict) -> str:
        """Create a launch template from CreateLaunchTemplate kwargs.

        Returns the new LaunchTemplateId.
        """
        ...

    def describe_launch_templates(self, request: dict | None = None) -> list[dict]:
        """List launch templates as {"LaunchTemplateName": ...} entries."""
        ...

    def describe_launch_template_versions(self, request: dict) -> list[dict]:
        """List versions of every template whose name matches the request."""
        ...

    def delete_launch_template(self, request: dict) -> int:
        """Delete every template whose name matches; returns how many went."""
        ...
