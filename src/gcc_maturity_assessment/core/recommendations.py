"""Recommendation rule table for GCC maturity assessments.

Each ``RecommendationRule`` pairs a guard over the scoring context with a
template for the recommendation it emits. Rules are evaluated independently
in table order and every matching rule fires; the output keeps that order and
is never re-sorted by priority.

A missing (None) dimension score fails every "score is at least X" test, so
an unanswered dimension is treated the same as a score below the threshold.

Rule table:
    1. strategy < 3.0            -> strategic_alignment roadmap
    2. talent < 3.0              -> talent_capability_building upskilling
    3. adoption_scaling < 3.0    -> innovation_value_creation CoE
    4. technology or operating_model < 3.0
                                 -> operating_model_technology modernisation
    5. ai_trust < 3.5            -> risk_resilience ethics framework
    6. always                    -> impact_measurement_governance metrics
    7. archetype is laggards     -> strategic_alignment readiness assessment
    8. archetype is leaders      -> innovation_value_creation research
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from gcc_maturity_assessment.core.enums import (
    Archetype,
    Dimension,
    RecommendationCategory,
)
from gcc_maturity_assessment.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Inputs every rule guard and template parameter is evaluated against.

    Attributes:
        archetype: The assessment's archetype.
        dimension_scores: Score per dimension; missing keys count as None.
    """

    archetype: Archetype
    dimension_scores: Mapping[Dimension, Decimal | None]

    def score(self, dimension: Dimension) -> Decimal | None:
        """Return the score for a dimension, or None when unanswered."""
        return self.dimension_scores.get(dimension)

    def is_below(self, dimension: Dimension, threshold: str) -> bool:
        """True when the dimension is unanswered or scores under threshold."""
        score = self.score(dimension)
        return score is None or Decimal(str(score)) < Decimal(threshold)


Guard = Callable[[RuleContext], bool]
PriorityField = int | Callable[[RuleContext], int]
CriticalField = bool | Callable[[RuleContext], bool]


@dataclass(frozen=True)
class RecommendationTemplate:
    """Fixed content of a recommendation, with optionally computed fields.

    ``priority_level`` and ``is_critical_imperative`` may be constants or
    callables of the RuleContext for archetype- or score-dependent values.
    """

    category: RecommendationCategory
    title: str
    description: str
    priority_level: PriorityField
    is_critical_imperative: CriticalField
    expected_impact: str
    implementation_timeline: str


@dataclass(frozen=True)
class RecommendationDraft:
    """A recommendation ready to be persisted for an assessment.

    Attributes:
        category: Recommendation category.
        title: Short initiative title.
        description: What the organisation should do.
        priority_level: Priority 1 (lowest) to 5 (highest).
        is_critical_imperative: High-urgency flag, independent of priority.
        expected_impact: Outcome the initiative is expected to deliver.
        implementation_timeline: Rough delivery window.
    """

    category: RecommendationCategory
    title: str
    description: str
    priority_level: int
    is_critical_imperative: bool
    expected_impact: str
    implementation_timeline: str


@dataclass(frozen=True)
class RecommendationRule:
    """A guard and the recommendation it emits when the guard holds."""

    name: str
    guard: Guard
    template: RecommendationTemplate

    def apply(self, context: RuleContext) -> RecommendationDraft | None:
        """Draft this rule's recommendation, or None if the guard fails."""
        if not self.guard(context):
            return None
        template = self.template
        priority = template.priority_level
        critical = template.is_critical_imperative
        return RecommendationDraft(
            category=template.category,
            title=template.title,
            description=template.description,
            priority_level=priority(context) if callable(priority) else priority,
            is_critical_imperative=critical(context) if callable(critical) else critical,
            expected_impact=template.expected_impact,
            implementation_timeline=template.implementation_timeline,
        )


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="strategy_gap",
        guard=lambda ctx: ctx.is_below(Dimension.STRATEGY, "3.0"),
        template=RecommendationTemplate(
            category=RecommendationCategory.STRATEGIC_ALIGNMENT,
            title="Develop GenAI Strategic Roadmap",
            description=(
                "Create a comprehensive GenAI strategy aligned with business objectives "
                "and establish clear governance frameworks."
            ),
            priority_level=lambda ctx: 5 if ctx.archetype == Archetype.LAGGARDS else 4,
            is_critical_imperative=True,
            expected_impact=(
                "Improved strategic focus and resource allocation for GenAI initiatives"
            ),
            implementation_timeline="30-60 days",
        ),
    ),
    RecommendationRule(
        name="talent_gap",
        guard=lambda ctx: ctx.is_below(Dimension.TALENT, "3.0"),
        template=RecommendationTemplate(
            category=RecommendationCategory.TALENT_CAPABILITY_BUILDING,
            title="Implement GenAI Upskilling Program",
            description=(
                "Launch comprehensive training programs to build GenAI capabilities "
                "across all business functions."
            ),
            priority_level=5,
            is_critical_imperative=True,
            expected_impact=(
                "Enhanced workforce readiness and reduced skill gaps in GenAI adoption"
            ),
            implementation_timeline="60-90 days",
        ),
    ),
    RecommendationRule(
        name="adoption_gap",
        guard=lambda ctx: ctx.is_below(Dimension.ADOPTION_SCALING, "3.0"),
        template=RecommendationTemplate(
            category=RecommendationCategory.INNOVATION_VALUE_CREATION,
            title="Establish GenAI Center of Excellence",
            description=(
                "Create a dedicated center to drive innovation, standardize practices, "
                "and scale successful GenAI use cases."
            ),
            priority_level=4,
            is_critical_imperative=lambda ctx: ctx.archetype != Archetype.LEADERS,
            expected_impact=(
                "Accelerated innovation and systematic scaling of GenAI solutions"
            ),
            implementation_timeline="30-90 days",
        ),
    ),
    RecommendationRule(
        name="operating_model_technology_gap",
        guard=lambda ctx: (
            ctx.is_below(Dimension.TECHNOLOGY, "3.0")
            or ctx.is_below(Dimension.OPERATING_MODEL, "3.0")
        ),
        template=RecommendationTemplate(
            category=RecommendationCategory.OPERATING_MODEL_TECHNOLOGY,
            title="Modernize GenAI Infrastructure",
            description=(
                "Upgrade technology infrastructure and establish robust operating "
                "models to support GenAI workloads."
            ),
            priority_level=4,
            # Critical only for an answered, very weak technology score
            is_critical_imperative=lambda ctx: (
                ctx.score(Dimension.TECHNOLOGY) is not None
                and ctx.is_below(Dimension.TECHNOLOGY, "2.0")
            ),
            expected_impact=(
                "Improved performance, scalability, and reliability of GenAI applications"
            ),
            implementation_timeline="60-90 days",
        ),
    ),
    RecommendationRule(
        name="ai_trust_gap",
        guard=lambda ctx: ctx.is_below(Dimension.AI_TRUST, "3.5"),
        template=RecommendationTemplate(
            category=RecommendationCategory.RISK_RESILIENCE,
            title="Implement AI Ethics and Risk Framework",
            description=(
                "Establish comprehensive AI governance, ethics guidelines, and risk "
                "management practices for responsible GenAI deployment."
            ),
            priority_level=5,
            is_critical_imperative=True,
            expected_impact=(
                "Reduced compliance risks and enhanced stakeholder trust in GenAI initiatives"
            ),
            implementation_timeline="30-60 days",
        ),
    ),
    RecommendationRule(
        name="impact_measurement",
        guard=lambda ctx: True,
        template=RecommendationTemplate(
            category=RecommendationCategory.IMPACT_MEASUREMENT_GOVERNANCE,
            title="Establish GenAI Performance Metrics",
            description=(
                "Define and implement comprehensive KPIs and measurement frameworks "
                "to track GenAI impact and ROI."
            ),
            priority_level=3,
            is_critical_imperative=False,
            expected_impact=(
                "Better visibility into GenAI value creation and data-driven decision making"
            ),
            implementation_timeline="30-60 days",
        ),
    ),
    RecommendationRule(
        name="laggards_readiness",
        guard=lambda ctx: ctx.archetype == Archetype.LAGGARDS,
        template=RecommendationTemplate(
            category=RecommendationCategory.STRATEGIC_ALIGNMENT,
            title="GenAI Readiness Assessment",
            description=(
                "Conduct comprehensive organizational readiness assessment before "
                "large-scale GenAI implementation."
            ),
            priority_level=5,
            is_critical_imperative=True,
            expected_impact=(
                "Clear understanding of organizational gaps and priority areas for "
                "GenAI adoption"
            ),
            implementation_timeline="30 days",
        ),
    ),
    RecommendationRule(
        name="leaders_research",
        guard=lambda ctx: ctx.archetype == Archetype.LEADERS,
        template=RecommendationTemplate(
            category=RecommendationCategory.INNOVATION_VALUE_CREATION,
            title="Advanced GenAI Research Initiatives",
            description=(
                "Invest in cutting-edge GenAI research and development to maintain "
                "competitive advantage."
            ),
            priority_level=2,
            is_critical_imperative=False,
            expected_impact="Sustained innovation leadership and competitive differentiation",
            implementation_timeline="90+ days",
        ),
    ),
)


def generate_recommendations(
    archetype: Archetype,
    dimension_scores: Mapping[Dimension, Decimal | None],
    rules: tuple[RecommendationRule, ...] = RECOMMENDATION_RULES,
) -> list[RecommendationDraft]:
    """Evaluate the rule table and draft every matching recommendation.

    Args:
        archetype: The assessment's archetype.
        dimension_scores: Score per dimension; absent or None means unanswered.
        rules: Rule table to evaluate, in order.

    Returns:
        Drafts in rule order. With the default table this always contains
        exactly one impact_measurement_governance entry.
    """
    context = RuleContext(archetype=Archetype(archetype), dimension_scores=dimension_scores)

    drafts: list[RecommendationDraft] = []
    fired: list[str] = []
    for rule in rules:
        draft = rule.apply(context)
        if draft is None:
            continue
        drafts.append(draft)
        fired.append(rule.name)

    logger.debug(
        "Recommendation rules evaluated",
        archetype=context.archetype.value,
        rule_count=len(rules),
        fired_rules=fired,
    )
    return drafts
