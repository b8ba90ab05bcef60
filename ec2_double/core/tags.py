"""Tag specification helpers."""

from __future__ import annotations

RESOURCE_TYPE_LAUNCH_TEMPLATE = "launch-template"
LAUNCH_TEMPLATE_ID_PREFIX = "lt-"

# Identifier prefix -> EC2 ResourceType, longest prefixes first.
_RESOURCE_TYPE_PREFIXES = (
    ("subnet-", "subnet"),
    ("sg-", "security-group"),
    ("vpc-", "vpc"),
    ("vol-", "volume"),
    ("eni-", "network-interface"),
    ("ami-", "image"),
    (LAUNCH_TEMPLATE_ID_PREFIX, RESOURCE_TYPE_LAUNCH_TEMPLATE),
    ("i-", "instance"),
)


def tag_specifications_to_tags(
    specifications: list[dict] | None, resource_type: str
) -> list[dict]:
    """Collect the tags of every specification for the given resource type."""
    tags = []
    for specification in specifications or []:
        if specification.get("ResourceType") != resource_type:
            continue
        tags.extend(specification.get("Tags") or [])
    return tags


def resource_type_for_id(resource_id: str) -> str:
    """Infer the EC2 ResourceType from an identifier prefix ("" if unknown)."""
    for prefix, resource_type in _RESOURCE_TYPE_PREFIXES:
        if resource_id.startswith(prefix):
            return resource_type
    return ""
