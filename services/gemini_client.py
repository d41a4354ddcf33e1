"""
Gemini Client - Adapters over the Gemini client libraries

Each adapter wraps one version of the SDK and declares up front which model
listing calls it supports, so callers never inspect the SDK at runtime:

- GenAIClient: the current ``google-genai`` package (``client.models.list``).
- LegacyGenerativeAIClient: the older ``google-generativeai`` package
  (module level ``list_models``).
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from google import genai

import config
from services.errors import ProviderError


@dataclass(frozen=True)
class ModelDescriptor:
    """One model offering reported by the provider."""
    identifier: str
    raw_metadata: dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a listing call: the models found, or why the call failed."""
    models: List[ModelDescriptor] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str) -> "DiscoveryResult":
        return cls(models=[], error=error)


class DiscoveryStrategy(ABC):
    """A single way of asking the provider which models the account can use."""

    name = "discovery"

    def list_models(self) -> DiscoveryResult:
        try:
            models = self._fetch()
        except Exception as e:  # noqa: BLE001
            logging.warning(f"⚠️ {self.name} failed: {e}")
            return DiscoveryResult.failure(str(e))

        logging.info(f"Available models: {[m.identifier for m in models]}")
        return DiscoveryResult(models=models)

    @abstractmethod
    def _fetch(self) -> List[ModelDescriptor]:
        raise NotImplementedError


class ModelHandle(ABC):
    """A model that can be prompted for text."""

    def __init__(self, identifier: str):
        self.identifier = identifier

    @abstractmethod
    async def generate_text(self, prompt: str) -> Optional[str]:
        raise NotImplementedError


class ProviderClient(ABC):
    """Fixed capability contract shared by every SDK adapter."""

    modern_listing: Optional[DiscoveryStrategy] = None
    legacy_listing: Optional[DiscoveryStrategy] = None

    def discovery_strategy(self) -> Optional[DiscoveryStrategy]:
        """The listing call to use: modern first, legacy otherwise."""
        return self.modern_listing or self.legacy_listing

    @abstractmethod
    def get_model(self, identifier: str) -> ModelHandle:
        raise NotImplementedError


# ===== google-genai =====

class GenAIModelsList(DiscoveryStrategy):
    name = "models.list"

    def __init__(self, client: "genai.Client"):
        self._client = client

    def _fetch(self) -> List[ModelDescriptor]:
        pager = self._client.models.list(config={"page_size": config.MODEL_LIST_PAGE_SIZE})
        return [
            ModelDescriptor(identifier=m.name, raw_metadata=m.model_dump(mode="json", exclude_none=True))
            for m in pager
            if m.name
        ]


class GenAIModel(ModelHandle):

    def __init__(self, client: "genai.Client", identifier: str):
        super().__init__(identifier)
        self._client = client

    async def generate_text(self, prompt: str) -> Optional[str]:
        response = await self._client.aio.models.generate_content(model=self.identifier, contents=prompt)
        return response.text


class GenAIClient(ProviderClient):
    """Adapter for the google-genai SDK."""

    def __init__(self, api_key: str):
        self._client = genai.Client(api_key=api_key)
        self.modern_listing = GenAIModelsList(self._client)

    def get_model(self, identifier: str) -> ModelHandle:
        # Confirms the identifier exists for this account before it is used
        try:
            model = self._client.models.get(model=identifier)
        except Exception as e:  # noqa: BLE001
            raise ProviderError(f"Model {identifier} is not available: {e}") from e
        return GenAIModel(self._client, model.name or identifier)


# ===== google-generativeai (legacy) =====

class LegacyListModels(DiscoveryStrategy):
    name = "list_models"

    def __init__(self, sdk):
        self._sdk = sdk

    def _fetch(self) -> List[ModelDescriptor]:
        return [
            ModelDescriptor(identifier=m.name, raw_metadata=dataclasses.asdict(m))
            for m in self._sdk.list_models(page_size=config.MODEL_LIST_PAGE_SIZE)
        ]


class LegacyGenerativeModel(ModelHandle):

    def __init__(self, model, identifier: str):
        super().__init__(identifier)
        self._model = model

    async def generate_text(self, prompt: str) -> Optional[str]:
        response = await self._model.generate_content_async(prompt)
        return response.text


class LegacyGenerativeAIClient(ProviderClient):
    """Adapter for the google-generativeai SDK."""

    def __init__(self, api_key: str):
        try:
            import google.generativeai as legacy_genai
        except ImportError as e:
            raise ProviderError(
                "google-generativeai is not installed. Install the 'legacy' extra or set GEMINI_SDK=genai."
            ) from e

        legacy_genai.configure(api_key=api_key)
        self._sdk = legacy_genai
        self.legacy_listing = LegacyListModels(legacy_genai)

    def get_model(self, identifier: str) -> ModelHandle:
        try:
            model = self._sdk.GenerativeModel(model_name=identifier)
        except Exception as e:  # noqa: BLE001
            raise ProviderError(f"Could not create model {identifier}: {e}") from e
        return LegacyGenerativeModel(model, identifier)


SDK_ADAPTERS: Dict[str, Type[ProviderClient]] = {
    "genai": GenAIClient,
    "generativeai": LegacyGenerativeAIClient,
}


def build_provider_client(api_key: Optional[str], sdk: str = "genai") -> Optional[ProviderClient]:
    """Create the adapter for the configured SDK, or None when there is no key."""
    if not api_key:
        return None

    adapter = SDK_ADAPTERS.get(sdk.lower().strip())
    if adapter is None:
        logging.error(f"❌ Unknown GEMINI_SDK '{sdk}', expected one of {sorted(SDK_ADAPTERS)}")
        return None

    try:
        return adapter(api_key)
    except Exception as e:  # noqa: BLE001
        logging.error(f"❌ Error creating Gemini client: {e}")
        return None
