"""SQLAlchemy ORM models for the GCC maturity assessment.

Tables:
    assessment_questions   static questionnaire reference data
    assessments            one row per organisation intake, with scores
    assessment_responses   individual 1-5 answers, append-only
    recommendations        generated recommendations, append-only
    business_queries       free-text questions raised by an assessed GCC
    resources              resource hub content, optionally targeted
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from gcc_maturity_assessment.core.enums import (
    Archetype,
    BusinessFunction,
    ContentType,
    Dimension,
    RecommendationCategory,
)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def _enum_column(enum_cls: type[Enum], name: str) -> SAEnum:
    """Store an enum by its string value in a portable VARCHAR column."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        length=50,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


class Base(DeclarativeBase):
    """Declarative base for all maturity assessment tables."""


class AssessmentQuestion(Base):
    """A questionnaire item scoring one maturity dimension.

    Table: assessment_questions
    """

    __tablename__ = "assessment_questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dimension: Mapped[Dimension] = mapped_column(
        _enum_column(Dimension, "maturity_dimension"),
        nullable=False,
        index=True,
        comment="Maturity dimension scored by this question",
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Position of the question within its dimension",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )


class Assessment(Base):
    """An organisation's maturity assessment.

    Score columns stay NULL until responses are submitted. The overall
    score, the seven dimension scores and the archetype are always written
    together by the scoring step.

    Table: assessments
    """

    __tablename__ = "assessments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gcc_name: Mapped[str] = mapped_column(Text, nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    annual_productivity_upliftment: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Annual productivity upliftment attributed to GenAI, percent",
    )
    attrition_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        comment="Annual attrition rate, percent",
    )
    genai_use_cases_developed: Mapped[int] = mapped_column(Integer, nullable=False)

    overall_maturity_score: Mapped[Decimal | None] = mapped_column(
        Numeric(5, 2),
        nullable=True,
        comment="Mean of all response values, 1.00-5.00",
    )
    strategy_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    talent_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    operating_model_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    technology_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    data_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    adoption_scaling_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    ai_trust_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    archetype: Mapped[Archetype | None] = mapped_column(
        _enum_column(Archetype, "gcc_archetype"),
        nullable=True,
        comment="Archetype derived from overall_maturity_score",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        onupdate=_utcnow,
    )


class AssessmentResponse(Base):
    """A single 1-5 answer to one question within one assessment.

    Each question is answered at most once per assessment.

    Table: assessment_responses
    """

    __tablename__ = "assessment_responses"
    __table_args__ = (
        UniqueConstraint(
            "assessment_id",
            "question_id",
            name="uq_assessment_responses_assessment_question",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    assessment_id: Mapped[int] = mapped_column(
        ForeignKey("assessments.id"),
        nullable=False,
        index=True,
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("assessment_questions.id"),
        nullable=False,
        index=True,
    )
    response_value: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Answer on a 1-5 scale",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )


class Recommendation(Base):
    """A generated recommendation for an assessment.

    Table: recommendations
    """

    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    assessment_id: Mapped[int] = mapped_column(
        ForeignKey("assessments.id"),
        nullable=False,
        index=True,
    )
    category: Mapped[RecommendationCategory] = mapped_column(
        _enum_column(RecommendationCategory, "recommendation_category"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    priority_level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Priority 1 (lowest) to 5 (highest)",
    )
    is_critical_imperative: Mapped[bool] = mapped_column(Boolean, nullable=False)
    expected_impact: Mapped[str | None] = mapped_column(Text, nullable=True)
    implementation_timeline: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )


class BusinessQuery(Base):
    """A free-text business question raised against an assessment.

    Table: business_queries
    """

    __tablename__ = "business_queries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    assessment_id: Mapped[int] = mapped_column(
        ForeignKey("assessments.id"),
        nullable=False,
        index=True,
    )
    query_text: Mapped[str] = mapped_column(Text, nullable=False)
    target_function: Mapped[BusinessFunction] = mapped_column(
        _enum_column(BusinessFunction, "business_function"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )


class Resource(Base):
    """Resource hub content, optionally aimed at an archetype or dimension.

    Table: resources
    """

    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content_type: Mapped[ContentType] = mapped_column(
        _enum_column(ContentType, "content_type"),
        nullable=False,
    )
    target_archetype: Mapped[Archetype | None] = mapped_column(
        _enum_column(Archetype, "gcc_archetype"),
        nullable=True,
        index=True,
    )
    target_dimension: Mapped[Dimension | None] = mapped_column(
        _enum_column(Dimension, "maturity_dimension"),
        nullable=True,
        index=True,
    )
    content_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
