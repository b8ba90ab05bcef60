"""Run the same launch template flow against LocalStack EC2 and the mock."""

from __future__ import annotations

import uuid

from ec2_double.backends.aws.launch_templates import EC2LaunchTemplateStore
from ec2_double.backends.mock.launch_templates import LaunchTemplateRegistry


def _exercise(store, name: str) -> None:
    request = {
        "LaunchTemplateName": name,
        "LaunchTemplateData": {
            "ImageId": "ami-12345678",
            "InstanceType": "t2.micro",
            "Monitoring": {"Enabled": True},
        },
    }
    launch_template_id = store.create_launch_template(request)
    assert launch_template_id.startswith("lt-")

    names = [t.get("LaunchTemplateName") for t in store.describe_launch_templates()]
    assert name in names

    versions = store.describe_launch_template_versions({"LaunchTemplateName": name})
    assert len(versions) == 1
    assert versions[0]["LaunchTemplateId"] == launch_template_id
    assert versions[0]["DefaultVersion"] is True
    assert versions[0]["LaunchTemplateData"]["ImageId"] == "ami-12345678"
    assert versions[0]["LaunchTemplateData"]["InstanceType"] == "t2.micro"

    store.delete_launch_template({"LaunchTemplateName": name})
    assert store.describe_launch_template_versions({"LaunchTemplateName": name}) == []

    # Deleting again is not an error on either backend.
    assert store.delete_launch_template({"LaunchTemplateName": name}) == 0


def test_mock_registry_flow():
    _exercise(LaunchTemplateRegistry(), "e2e-mock")


def test_localstack_flow(localstack_env):
    store = EC2LaunchTemplateStore(
        endpoint_url=localstack_env["endpoint_url"],
        region_name=localstack_env["region"],
    )

    _exercise(store, f"e2e-{uuid.uuid4().hex[:8]}")
