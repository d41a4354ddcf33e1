"""
Learning Path Service - Generates learning paths from a list of skills
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from models.schemas import GenerationResult, LearningModule, Resource
from services.errors import PathValidationError
from services.model_resolver import ResolvedModel
from services.response_sanitizer import ParseFailure, sanitize

DEMO_PATH = [
    LearningModule(
        title="Mathematics for Data Science",
        duration="8 weeks",
        description=(
            "Covers essential mathematical concepts like linear algebra, calculus, probability, "
            "and statistics crucial for understanding and applying data science techniques."
        ),
        resources=[
            Resource(name="Khan Academy Linear Algebra", url="https://www.khanacademy.org/math/linear-algebra"),
            Resource(
                name="MIT OpenCourseWare Calculus",
                url="https://ocw.mit.edu/courses/mathematics/18-01sc-single-variable-calculus-fall-2010/",
            ),
            Resource(
                name="3Blue1Brown Essence of Linear Algebra",
                url="https://www.youtube.com/playlist?list=PLZHQObOWTQDPD3MizzM2xVFitgF8hE_ab",
            ),
            Resource(name="Statistics with R by Peng", url="https://www.coursera.org/learn/statistics"),
        ],
    )
]


def build_prompt(skills: str) -> str:
    return f"""Generate a structured learning path for: {skills}.
Return JSON array of modules with fields:
- title
- duration
- description
- resources: array of {{ name, url }}"""


def fallback_path(skills: str) -> List[dict]:
    """Single-module path used when the model output cannot be decoded."""
    query = quote(skills, safe="!~*'()")
    module = LearningModule(
        title=f"Learn {skills}",
        duration="4 weeks",
        description="Structured learning path generated by AI.",
        resources=[Resource(name="Google Search", url=f"https://www.google.com/search?q={query}")],
    )
    return [module.model_dump()]


class LearningPathService:
    """Service for turning skills into learning paths with the resolved model."""

    def __init__(self, resolved_model: Optional[ResolvedModel]):
        self.resolved_model = resolved_model

    async def generate_path(self, skills: Optional[str]) -> GenerationResult:
        """Generate a learning path.

        Raises PathValidationError for blank skills. Every other failure is
        reported through the returned GenerationResult.
        """
        if not skills or not skills.strip():
            raise PathValidationError("Skills are required")
        skills = skills.strip()

        if self.resolved_model is None:
            return GenerationResult(
                success=True,
                mode="mock",
                data=[module.model_dump() for module in DEMO_PATH],
            )

        identifier = self.resolved_model.identifier
        logging.info(f"Generating learning path with {identifier} for: {skills[:50]}")
        try:
            output = await self.resolved_model.handle.generate_text(build_prompt(skills))
        except Exception as e:
            logging.error(f"❌ Error generating path: {e}")
            return GenerationResult(success=False, error=str(e) or type(e).__name__)

        parsed = sanitize(output)
        if isinstance(parsed, ParseFailure):
            logging.warning(f"⚠️ AI returned invalid JSON ({parsed.reason}), using fallback path.")
            parsed = fallback_path(skills)

        return GenerationResult(success=True, mode="ai", model=identifier, data=parsed)
