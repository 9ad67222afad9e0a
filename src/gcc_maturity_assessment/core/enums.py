"""Enumeration types for the GCC Maturity Assessment service."""

from enum import Enum


class Dimension(str, Enum):
    """The seven maturity dimensions assessed by the questionnaire.

    Declaration order is the canonical display and sort order.
    """

    STRATEGY = "strategy"
    TALENT = "talent"
    OPERATING_MODEL = "operating_model"
    TECHNOLOGY = "technology"
    DATA = "data"
    ADOPTION_SCALING = "adoption_scaling"
    AI_TRUST = "ai_trust"


class Archetype(str, Enum):
    """Maturity tier derived from the overall score."""

    LEADERS = "leaders"
    PROGRESSORS = "progressors"
    EMERGENTS = "emergents"
    LAGGARDS = "laggards"


class RecommendationCategory(str, Enum):
    """Categories a recommendation can belong to."""

    STRATEGIC_ALIGNMENT = "strategic_alignment"
    TALENT_CAPABILITY_BUILDING = "talent_capability_building"
    INNOVATION_VALUE_CREATION = "innovation_value_creation"
    OPERATING_MODEL_TECHNOLOGY = "operating_model_technology"
    RISK_RESILIENCE = "risk_resilience"
    IMPACT_MEASUREMENT_GOVERNANCE = "impact_measurement_governance"


class BusinessFunction(str, Enum):
    """Business function a free-text business query is aimed at."""

    FINANCE = "finance"
    HR = "hr"
    OPERATIONS = "operations"
    TECHNOLOGY = "technology"
    MARKETING = "marketing"
    CUSTOMER_SERVICE = "customer_service"
    PROCUREMENT = "procurement"
    RISK_MANAGEMENT = "risk_management"


class ContentType(str, Enum):
    """Kinds of content in the resource hub."""

    CASE_STUDY = "case_study"
    BEST_PRACTICE = "best_practice"
    INSIGHT = "insight"
    FRAMEWORK = "framework"


ALL_DIMENSIONS: list[Dimension] = list(Dimension)

# Position of each dimension in the canonical order
DIMENSION_ORDER: dict[Dimension, int] = {
    dimension: index for index, dimension in enumerate(Dimension)
}

# Assessment column holding each dimension's score
DIMENSION_SCORE_FIELDS: dict[Dimension, str] = {
    dimension: f"{dimension.value}_score" for dimension in Dimension
}
