"""In-memory tag store for testing."""

from __future__ import annotations

import threading

from ec2_double.core.tags import resource_type_for_id


class InMemoryTagStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._tags: dict[str, dict[str, str]] = {}

    def add_tags(self, resource_id: str, *tags: dict) -> None:
        with self._lock:
            for tag in tags:
                if tag.get("Key") is None:
                    raise ValueError(f"Tag for {resource_id} is missing a Key: {tag}")
            resource_tags = self._tags.setdefault(resource_id, {})
            for tag in tags:
                resource_tags[tag["Key"]] = tag.get("Value", "")

    def get_tags(self, resource_id: str) -> dict[str, str]:
        with self._lock:
            return dict(self._tags.get(resource_id, {}))

    def describe_tags(
        self, *, resource_id: str | None = None, key: str | None = None
    ) -> list[dict]:
        with self._lock:
            results = []
            for rid, resource_tags in self._tags.items():
                if resource_id is not None and rid != resource_id:
                    continue
                for k, v in resource_tags.items():
                    if key is not None and k != key:
                        continue
                    results.append(
                        {
                            "ResourceId": rid,
                            "ResourceType": resource_type_for_id(rid),
                            "Key": k,
                            "Value": v,
                        }
                    )
            return results
