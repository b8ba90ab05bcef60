"""EC2-backed launch template store — same interface as the in-memory registry."""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODES = {
    "InvalidLaunchTemplateName.NotFoundException",
    "InvalidLaunchTemplateId.NotFound",
    "InvalidLaunchTemplateId.NotFoundException",
}


def _is_not_found(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") in NOT_FOUND_ERROR_CODES


class EC2LaunchTemplateStore:
    def __init__(
        self,
        endpoint_url: str | None = None,
        region_name: str | None = None,
        client=None,
    ):
        if client is None:
            kwargs = {}
            if endpoint_url:
                kwargs["endpoint_url"] = endpoint_url
            if region_name:
                kwargs["region_name"] = region_name
            client = boto3.client("ec2", **kwargs)
        self._ec2 = client

    def create_launch_template(self, request: dict) -> str:
        resp = self._ec2.create_launch_template(**request)
        launch_template_id = resp["LaunchTemplate"]["LaunchTemplateId"]
        logger.info(
            "Created launch template %s (name=%s)",
            launch_template_id,
            request.get("LaunchTemplateName"),
        )
        return launch_template_id

    def describe_launch_templates(self, request: dict | None = None) -> list[dict]:
        paginator = self._ec2.get_paginator("describe_launch_templates")
        results = []
        for page in paginator.paginate(**(request or {})):
            for template in page.get("LaunchTemplates", []):
                results.append({"LaunchTemplateName": template["LaunchTemplateName"]})
        return results

    def describe_launch_template_versions(self, request: dict) -> list[dict]:
        """List versions by name; an unknown name yields an empty list."""
        paginator = self._ec2.get_paginator("describe_launch_template_versions")
        versions = []
        try:
            for page in paginator.paginate(**request):
                versions.extend(page.get("LaunchTemplateVersions", []))
        except ClientError as exc:
            if _is_not_found(exc):
                logger.debug("No launch template named %s", request.get("LaunchTemplateName"))
                return []
            raise
        return versions

    def delete_launch_template(self, request: dict) -> int:
        """Delete by name; an unknown name is a no-op returning 0."""
        try:
            self._ec2.delete_launch_template(**request)
        except ClientError as exc:
            if _is_not_found(exc):
                return 0
            raise
        logger.info("Deleted launch template %s", request.get("LaunchTemplateName"))
        return 1
