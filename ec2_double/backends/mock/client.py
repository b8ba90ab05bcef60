"""Mock EC2 client — a drop-in for the launch template calls of boto3.client("ec2")."""

from __future__ import annotations

from ec2_double.backends.mock.launch_templates import LaunchTemplateRegistry
from ec2_double.backends.mock.tags import InMemoryTagStore


class MockEC2Client:
    """Answers boto3-style keyword calls with boto3-shaped response dicts.

    Pass your own registry or tag store to inspect them from a test; by
    default each client gets fresh, isolated ones. An injected registry
    brings its own tag store, which must be able to describe tags.
    """

    def __init__(
        self,
        registry: LaunchTemplateRegistry | None = None,
        tags: InMemoryTagStore | None = None,
    ):
        if registry is None:
            registry = LaunchTemplateRegistry(
                tags=tags if tags is not None else InMemoryTagStore()
            )
        elif tags is not None and tags is not registry.tags:
            raise ValueError("tags must be the tag store the registry writes to")
        if not hasattr(registry.tags, "describe_tags"):
            raise ValueError(
                f"Tag store {type(registry.tags).__name__} cannot describe tags"
            )
        self.registry = registry
        self.tags = registry.tags

    def create_launch_template(self, **kwargs) -> dict:
        # The create response does not echo the stored template.
        self.registry.create_launch_template(kwargs)
        return {}

    def describe_launch_templates(self, **kwargs) -> dict:
        return {"LaunchTemplates": self.registry.describe_launch_templates(kwargs)}

    def describe_launch_template_versions(self, **kwargs) -> dict:
        return {
            "LaunchTemplateVersions": self.registry.describe_launch_template_versions(kwargs)
        }

    def delete_launch_template(self, **kwargs) -> dict:
        self.registry.delete_launch_template(kwargs)
        return {}

    def describe_tags(self, Filters: list[dict] | None = None, **kwargs) -> dict:
        """Describe tags, honouring the resource-id and key filters."""
        resource_ids = [None]
        keys = [None]
        for f in Filters or []:
            # Several values in one filter are ORed together.
            values = list(dict.fromkeys(f.get("Values", [])))
            if f.get("Name") == "resource-id":
                resource_ids = values
            elif f.get("Name") == "key":
                keys = values
            else:
                raise ValueError(f"Unsupported tag filter: {f.get('Name')}")

        tags = []
        for resource_id in resource_ids:
            for key in keys:
                tags.extend(self.tags.describe_tags(resource_id=resource_id, key=key))
        return {"Tags": tags}
