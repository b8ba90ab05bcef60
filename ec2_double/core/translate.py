"""Project CreateLaunchTemplate request data into the describe response shape.

RequestLaunchTemplateData and ResponseLaunchTemplateData mostly share field
names, but not every request field has a response counterpart and the nested
types differ. Each structure below lists exactly the fields carried across.
Fields missing from the request stay missing from the response.
"""

from __future__ import annotations

import copy

SCALAR_FIELDS = (
    "DisableApiTermination",
    "EbsOptimized",
    "ImageId",
    "InstanceType",
    "KeyName",
    "SecurityGroupIds",
    "SecurityGroups",
    "UserData",
)
MONITORING_FIELDS = ("Enabled",)
CPU_OPTIONS_FIELDS = ("CoreCount", "ThreadsPerCore")
CREDIT_SPECIFICATION_FIELDS = ("CpuCredits",)
IAM_INSTANCE_PROFILE_FIELDS = ("Arn", "Name")
BLOCK_DEVICE_MAPPING_FIELDS = ("DeviceName", "NoDevice", "VirtualName")
EBS_FIELDS = (
    "DeleteOnTermination",
    "Encrypted",
    "Iops",
    "KmsKeyId",
    "SnapshotId",
    "VolumeSize",
    "VolumeType",
)
SPOT_OPTIONS_FIELDS = (
    "BlockDurationMinutes",
    "InstanceInterruptionBehavior",
    "MaxPrice",
    "SpotInstanceType",
    "ValidUntil",
)
NETWORK_INTERFACE_FIELDS = (
    "AssociatePublicIpAddress",
    "DeleteOnTermination",
    "Description",
    "DeviceIndex",
    "Groups",
    "Ipv6AddressCount",
    "NetworkInterfaceId",
    "PrivateIpAddress",
    "PrivateIpAddresses",
    "SecondaryPrivateIpAddressCount",
    "SubnetId",
)
TAG_SPECIFICATION_FIELDS = ("ResourceType", "Tags")


def _pick(source: dict, fields: tuple[str, ...]) -> dict:
    """Copy the listed fields that are present (and not None) in source."""
    if not isinstance(source, dict):
        raise TypeError(f"Expected a dict, got {type(source).__name__}")
    return {
        field: copy.deepcopy(source[field])
        for field in fields
        if source.get(field) is not None
    }


def _optional_block(data: dict, key: str, fields: tuple[str, ...]) -> dict | None:
    block = data.get(key)
    if block is None:
        return None
    return _pick(block, fields)


def translate_block_device_mapping(mapping: dict) -> dict:
    result = _pick(mapping, BLOCK_DEVICE_MAPPING_FIELDS)
    ebs = _optional_block(mapping, "Ebs", EBS_FIELDS)
    if ebs is not None:
        result["Ebs"] = ebs
    return result


def translate_instance_market_options(options: dict) -> dict:
    """Translate InstanceMarketOptions.

    A missing SpotOptions block is left out of the result rather than failing;
    MarketType is still carried across.
    """
    result = _pick(options, ("MarketType",))
    spot = _optional_block(options, "SpotOptions", SPOT_OPTIONS_FIELDS)
    if spot is not None:
        result["SpotOptions"] = spot
    return result


def translate_network_interface(interface: dict) -> dict:
    return _pick(interface, NETWORK_INTERFACE_FIELDS)


def translate_tag_specification(specification: dict) -> dict:
    return _pick(specification, TAG_SPECIFICATION_FIELDS)


def translate_launch_template_data(data: dict | None) -> dict:
    """Build ResponseLaunchTemplateData from RequestLaunchTemplateData."""
    if data is None:
        return {}
    response = _pick(data, SCALAR_FIELDS)

    for key, fields in (
        ("Monitoring", MONITORING_FIELDS),
        ("CpuOptions", CPU_OPTIONS_FIELDS),
        ("CreditSpecification", CREDIT_SPECIFICATION_FIELDS),
        ("IamInstanceProfile", IAM_INSTANCE_PROFILE_FIELDS),
    ):
        block = _optional_block(data, key, fields)
        if block is not None:
            response[key] = block

    if data.get("InstanceMarketOptions") is not None:
        response["InstanceMarketOptions"] = translate_instance_market_options(
            data["InstanceMarketOptions"]
        )

    # Empty lists are treated the same as missing ones.
    if data.get("BlockDeviceMappings"):
        response["BlockDeviceMappings"] = [
            translate_block_device_mapping(m) for m in data["BlockDeviceMappings"]
        ]
    if data.get("NetworkInterfaces"):
        response["NetworkInterfaces"] = [
            translate_network_interface(n) for n in data["NetworkInterfaces"]
        ]
    if data.get("TagSpecifications"):
        response["TagSpecifications"] = [
            translate_tag_specification(s) for s in data["TagSpecifications"]
        ]

    return response
