"""Exceptions raised by the EC2 test double."""

from __future__ import annotations


class Ec2DoubleError(Exception):
    """Base exception for ec2_double errors."""


class DuplicateIdentifierError(Ec2DoubleError):
    """Raised when a freshly allocated identifier is already in the registry."""

    def __init__(self, resource_id: str):
        super().__init__(f"duplicate LaunchTemplateId {resource_id}")
        self.resource_id = resource_id
