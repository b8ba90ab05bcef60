"""In-memory launch template registry.

Each create stores a brand new record under a fresh ``lt-<n>`` identifier.
Names are not unique: describe-versions and delete act on every record that
carries the requested name.
"""

from __future__ import annotations

import copy
import itertools
import logging
import threading

from ec2_double.backends.mock.tags import InMemoryTagStore
from ec2_double.core.errors import DuplicateIdentifierError
from ec2_double.core.interfaces import TagBinder
from ec2_double.core.tags import (
    LAUNCH_TEMPLATE_ID_PREFIX,
    RESOURCE_TYPE_LAUNCH_TEMPLATE,
    tag_specifications_to_tags,
)
from ec2_double.core.translate import translate_launch_template_data

logger = logging.getLogger(__name__)


def _name_value(name: str | None) -> str:
    # A missing name compares equal to an empty one.
    return name or ""


class LaunchTemplateRegistry:
    """Stores launch templates for the lifetime of the instance.

    Every public method holds the lock for its whole duration.
    """

    def __init__(
        self,
        tags: TagBinder | None = None,
        records: dict[str, dict] | None = None,
    ):
        self.tags = tags if tags is not None else InMemoryTagStore()
        self._records: dict[str, dict] = records if records is not None else {}
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def create_launch_template(self, request: dict) -> str:
        with self._lock:
            launch_template_id = f"{LAUNCH_TEMPLATE_ID_PREFIX}{next(self._counter)}"
            if launch_template_id in self._records:
                raise DuplicateIdentifierError(launch_template_id)

            name = request.get("LaunchTemplateName")
            data = translate_launch_template_data(request.get("LaunchTemplateData"))
            tags = tag_specifications_to_tags(
                request.get("TagSpecifications"), RESOURCE_TYPE_LAUNCH_TEMPLATE
            )

            self._records[launch_template_id] = {"name": name, "data": data}
            try:
                self.tags.add_tags(launch_template_id, *tags)
            except Exception:
                logger.exception("Failed to tag %s, removing it", launch_template_id)
                del self._records[launch_template_id]
                raise

            logger.info("Created launch template %s (name=%s)", launch_template_id, name)
            return launch_template_id

    def describe_launch_templates(self, request: dict | None = None) -> list[dict]:
        with self._lock:
            results = []
            for record in self._records.values():
                entry = {}
                if record["name"] is not None:
                    entry["LaunchTemplateName"] = record["name"]
                results.append(entry)
            logger.debug("Described %d launch templates", len(results))
            return results

    def describe_launch_template_versions(self, request: dict) -> list[dict]:
        with self._lock:
            requested = request.get("LaunchTemplateName")
            versions = []
            for launch_template_id, record in self._records.items():
                if _name_value(record["name"]) != _name_value(requested):
                    continue
                version = {
                    "DefaultVersion": True,
                    "VersionNumber": 1,
                    "LaunchTemplateId": launch_template_id,
                    "LaunchTemplateData": copy.deepcopy(record["data"]),
                }
                if requested is not None:
                    version["LaunchTemplateName"] = requested
                versions.append(version)
            logger.debug("Found %d versions for name=%s", len(versions), requested)
            return versions

    def delete_launch_template(self, request: dict) -> int:
        with self._lock:
            requested = _name_value(request.get("LaunchTemplateName"))
            matched = [
                launch_template_id
                for launch_template_id, record in self._records.items()
                if _name_value(record["name"]) == requested
            ]
            for launch_template_id in matched:
                del self._records[launch_template_id]
            if matched:
                logger.info("Deleted launch templates %s (name=%s)", matched, requested)
            return len(matched)
