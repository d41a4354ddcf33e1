"""
Model Resolver - Picks the Gemini model used for the lifetime of the process
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import config
from services.gemini_client import ModelDescriptor, ModelHandle, ProviderClient


@dataclass(frozen=True)
class ResolvedModel:
    """The model chosen at startup. Never replaced once the server is running."""
    identifier: str
    handle: ModelHandle


def select_model(models: List[ModelDescriptor], preferred_family: str) -> Optional[str]:
    """First identifier in the preferred family, else the first one listed."""
    for model in models:
        if preferred_family in model.identifier:
            return model.identifier
    if models:
        return models[0].identifier
    return None


class ModelResolver:
    """Resolves a usable model once, falling back instead of failing."""

    def __init__(
        self,
        client: Optional[ProviderClient],
        preferred_family: str = config.PREFERRED_MODEL_FAMILY,
        fallback_model: str = config.FALLBACK_MODEL_NAME,
    ):
        self.client = client
        self.preferred_family = preferred_family
        self.fallback_model = fallback_model

    def resolve(self) -> Optional[ResolvedModel]:
        if self.client is None:
            logging.warning("⚠️ No Gemini client configured, running in demo mode.")
            return None

        identifier = self._discover()
        if not identifier:
            identifier = self.fallback_model
            logging.warning(f"🔍 Falling back to guessed model: {identifier}")

        try:
            handle = self.client.get_model(identifier)
        except Exception as e:  # noqa: BLE001
            logging.error(f"❌ Error initializing model {identifier}: {e}")
            return None

        logging.info(f"✅ Gemini model initialized: {handle.identifier}")
        return ResolvedModel(identifier=handle.identifier, handle=handle)

    def _discover(self) -> Optional[str]:
        strategy = self.client.discovery_strategy()
        if strategy is None:
            logging.warning("⚠️ This Gemini SDK does not support listing models.")
            return None

        logging.info(f"📡 Listing available models with {strategy.name}")
        result = strategy.list_models()
        if not result.ok:
            return None
        return select_model(result.models, self.preferred_family)
