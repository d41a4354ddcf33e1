"""
Shared fakes for the SkillPath tests. Nothing here talks to the network.
"""

import os
import sys

import pytest

# Add the current directory to the path so we can import our modules
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.errors import ProviderError
from services.gemini_client import DiscoveryStrategy, ModelDescriptor, ModelHandle, ProviderClient


class FakeModel(ModelHandle):
    def __init__(self, identifier, output=None, error=None):
        super().__init__(identifier)
        self.output = output
        self.error = error
        self.prompts = []

    async def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.output


class FakeStrategy(DiscoveryStrategy):
    def __init__(self, name, models=(), error=None):
        self.name = name
        self.models = list(models)
        self.error = error
        self.calls = 0

    def _fetch(self):
        self.calls += 1
        if self.error:
            raise self.error
        return [ModelDescriptor(identifier=m, raw_metadata={"name": m}) for m in self.models]


class FakeClient(ProviderClient):
    def __init__(self, modern=None, legacy=None, output=None, generate_error=None, unavailable=()):
        self.modern_listing = modern
        self.legacy_listing = legacy
        self.output = output
        self.generate_error = generate_error
        self.unavailable = set(unavailable)
        self.requested = []
        self.models = []

    def get_model(self, identifier):
        self.requested.append(identifier)
        if identifier in self.unavailable:
            raise ProviderError(f"Model {identifier} is not available")
        model = FakeModel(identifier, output=self.output, error=self.generate_error)
        self.models.append(model)
        return model


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def make_strategy():
    return FakeStrategy


@pytest.fixture
def make_model():
    return FakeModel
