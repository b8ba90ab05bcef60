"""Shared fixtures for unit tests — uses mock backends, no Docker needed."""

import pytest
import sys
import os

# Add project root to path so ec2_double is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from ec2_double.backends.mock.client import MockEC2Client
from ec2_double.backends.mock.launch_templates import LaunchTemplateRegistry
from ec2_double.backends.mock.tags import InMemoryTagStore


@pytest.fixture
def tags():
    return InMemoryTagStore()


@pytest.fixture
def registry(tags):
    return LaunchTemplateRegistry(tags=tags)


@pytest.fixture
def client(registry, tags):
    return MockEC2Client(registry=registry, tags=tags)
