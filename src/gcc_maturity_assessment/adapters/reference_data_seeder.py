"""Seed data for the questionnaire and the resource hub.

Both tables are reference data: they are populated once, when empty, at
service start-up and are read-only afterwards. Existing rows are never
modified or duplicated.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from gcc_maturity_assessment.adapters.repositories.assessment_repository import (
    QuestionRepository,
    ResourceRepository,
)
from gcc_maturity_assessment.core.enums import Archetype, ContentType, Dimension
from gcc_maturity_assessment.core.questions import QUESTION_BANK
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Resource hub starter content
# ---------------------------------------------------------------------------

RESOURCE_LIBRARY: list[dict[str, object]] = [
    {
        "title": "GenAI Strategy Canvas for GCCs",
        "description": (
            "A one-page framework for linking GenAI initiatives to parent-organisation "
            "objectives, funding, and success measures."
        ),
        "content_type": ContentType.FRAMEWORK,
        "target_archetype": Archetype.LAGGARDS,
        "target_dimension": Dimension.STRATEGY,
    },
    {
        "title": "Building a GenAI Academy in Twelve Weeks",
        "description": (
            "How one GCC trained 3,000 engineers and analysts on GenAI tooling with "
            "role-based learning paths."
        ),
        "content_type": ContentType.CASE_STUDY,
        "target_archetype": Archetype.EMERGENTS,
        "target_dimension": Dimension.TALENT,
    },
    {
        "title": "Hub-and-Spoke Operating Models for GenAI Delivery",
        "description": (
            "Patterns for organising a central GenAI team alongside embedded "
            "business-function squads."
        ),
        "content_type": ContentType.BEST_PRACTICE,
        "target_archetype": Archetype.PROGRESSORS,
        "target_dimension": Dimension.OPERATING_MODEL,
    },
    {
        "title": "Reference Architecture for an Enterprise GenAI Platform",
        "description": (
            "Core building blocks for model access, retrieval, evaluation, and "
            "monitoring on a shared platform."
        ),
        "content_type": ContentType.FRAMEWORK,
        "target_archetype": None,
        "target_dimension": Dimension.TECHNOLOGY,
    },
    {
        "title": "Making Enterprise Knowledge GenAI-Ready",
        "description": (
            "Practical steps for curating, classifying, and exposing document "
            "collections to retrieval-augmented applications."
        ),
        "content_type": ContentType.BEST_PRACTICE,
        "target_archetype": None,
        "target_dimension": Dimension.DATA,
    },
    {
        "title": "From Pilot to Production: Scaling GenAI Use Cases",
        "description": (
            "Why most GenAI pilots stall, and the funding and ownership practices "
            "that move them into production."
        ),
        "content_type": ContentType.INSIGHT,
        "target_archetype": Archetype.PROGRESSORS,
        "target_dimension": Dimension.ADOPTION_SCALING,
    },
    {
        "title": "Responsible AI Controls Checklist",
        "description": (
            "Pre-deployment and run-time controls for hallucination, data leakage, "
            "bias, and prompt injection risks."
        ),
        "content_type": ContentType.FRAMEWORK,
        "target_archetype": None,
        "target_dimension": Dimension.AI_TRUST,
    },
    {
        "title": "How Leading GCCs Run GenAI Research Labs",
        "description": (
            "Operating practices of GCCs that have moved beyond adoption to "
            "original GenAI research and product incubation."
        ),
        "content_type": ContentType.INSIGHT,
        "target_archetype": Archetype.LEADERS,
        "target_dimension": None,
    },
]


async def seed_reference_data(session: AsyncSession) -> dict[str, int]:
    """Insert the question bank and resource library into empty tables.

    Args:
        session: Session inside an open transaction.

    Returns:
        Number of rows inserted per table.
    """
    question_repo = QuestionRepository(session)
    resource_repo = ResourceRepository(session)

    inserted = {"assessment_questions": 0, "resources": 0}

    if await question_repo.count() == 0:
        records = await question_repo.create_bulk(
            [
                (question.dimension, question.question_order, question.question_text)
                for question in QUESTION_BANK
            ]
        )
        inserted["assessment_questions"] = len(records)

    if await resource_repo.count() == 0:
        records = await resource_repo.create_bulk(RESOURCE_LIBRARY)
        inserted["resources"] = len(records)

    logger.info("Reference data seeded", **inserted)
    return inserted
