"""
Data Models - Pydantic schemas for learning paths and API payloads
"""

from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional

class Resource(BaseModel):
    """A named link to study material."""
    name: str = Field(description="Display name of the resource")
    url: str = Field(description="Link to the resource")

class LearningModule(BaseModel):
    """Defines one step of a learning path."""
    title: str = Field(description="The title of the module")
    duration: str = Field(description="How long the module takes, e.g. '4 weeks'")
    description: str = Field(description="What the module covers")
    resources: List[Resource] = Field(default_factory=list, description="Links to study material for this module")

class GeneratePathRequest(BaseModel):
    """Body of POST /api/generate-path."""
    skills: Optional[str] = Field(None, description="Free-text list of skills to learn")

class GenerationResult(BaseModel):
    """Outcome of a learning path generation, serialized as the API response."""
    success: bool = Field(description="False only when the provider call itself failed")
    mode: Optional[Literal["mock", "ai"]] = Field(None, description="'mock' when no model is available, 'ai' otherwise")
    model: Optional[str] = Field(None, description="Identifier of the model that was invoked")
    # Provider output is passed through as decoded, without schema enforcement
    data: Optional[Any] = Field(None, description="The learning path modules")
    error: Optional[str] = Field(None, description="Failure message when success is false")

    def to_response(self) -> dict:
        """Serialize only the fields that were set for this outcome."""
        return self.model_dump(exclude_unset=True)

class HealthResponse(BaseModel):
    status: str = "ok"
    hasApiKey: bool
    model: Optional[str] = None
