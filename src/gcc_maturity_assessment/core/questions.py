"""GCC GenAI maturity question bank.

Contains the reference questionnaire: three questions for each of the seven
maturity dimensions, answered on a 1-5 scale (1 = not started, 5 = fully
embedded). Questions are seeded into the ``assessment_questions`` table on
first start-up and are read-only afterwards.

Dimensions:
    strategy           GenAI strategic alignment with business objectives
    talent             skills, hiring, and capability development
    operating_model    organisational structure and delivery processes
    technology         platforms, tooling, and infrastructure
    data               data quality, governance, and accessibility
    adoption_scaling   moving use cases from pilot to production at scale
    ai_trust           ethics, compliance, and risk management
"""

from dataclasses import dataclass

from gcc_maturity_assessment.core.enums import Dimension


@dataclass(frozen=True)
class QuestionDefinition:
    """A single question in the reference questionnaire.

    Attributes:
        dimension: Maturity dimension the question scores.
        question_order: Position within the dimension, starting at 1.
        question_text: Text presented to respondents.
    """

    dimension: Dimension
    question_order: int
    question_text: str


QUESTION_BANK: list[QuestionDefinition] = [
    # strategy
    QuestionDefinition(
        dimension=Dimension.STRATEGY,
        question_order=1,
        question_text=(
            "To what extent is GenAI explicitly part of the GCC's strategic plan, "
            "with objectives tied to parent-organisation business outcomes?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.STRATEGY,
        question_order=2,
        question_text=(
            "How clearly has GCC leadership defined a multi-year GenAI roadmap "
            "with funded initiatives and named owners?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.STRATEGY,
        question_order=3,
        question_text=(
            "How actively does the GCC shape, rather than only execute, the parent "
            "organisation's GenAI agenda?"
        ),
    ),
    # talent
    QuestionDefinition(
        dimension=Dimension.TALENT,
        question_order=1,
        question_text=(
            "What share of the GCC workforce has completed structured GenAI "
            "training relevant to their role?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.TALENT,
        question_order=2,
        question_text=(
            "How well can the GCC attract and retain specialist GenAI talent such as "
            "ML engineers, prompt engineers, and AI product managers?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.TALENT,
        question_order=3,
        question_text=(
            "To what extent are GenAI skills reflected in career paths, role "
            "definitions, and performance objectives?"
        ),
    ),
    # operating_model
    QuestionDefinition(
        dimension=Dimension.OPERATING_MODEL,
        question_order=1,
        question_text=(
            "Is there a defined operating model (hub, spoke, or federated) for "
            "delivering GenAI initiatives across business functions?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.OPERATING_MODEL,
        question_order=2,
        question_text=(
            "How standardised are the intake, prioritisation, and funding "
            "processes for new GenAI use cases?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.OPERATING_MODEL,
        question_order=3,
        question_text=(
            "How effectively do business, technology, and risk teams collaborate "
            "on GenAI delivery?"
        ),
    ),
    # technology
    QuestionDefinition(
        dimension=Dimension.TECHNOLOGY,
        question_order=1,
        question_text=(
            "Does the GCC have a shared platform for building, deploying, and "
            "monitoring GenAI applications?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.TECHNOLOGY,
        question_order=2,
        question_text=(
            "How mature is access to foundation models, vector stores, and compute "
            "capacity for GenAI workloads?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.TECHNOLOGY,
        question_order=3,
        question_text=(
            "To what extent are GenAI solutions integrated with core enterprise "
            "systems rather than running as stand-alone tools?"
        ),
    ),
    # data
    QuestionDefinition(
        dimension=Dimension.DATA,
        question_order=1,
        question_text=(
            "How would you rate the quality and completeness of the data available "
            "to GenAI use cases?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.DATA,
        question_order=2,
        question_text=(
            "How well are data ownership, lineage, and access controls documented "
            "and enforced for GenAI workloads?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.DATA,
        question_order=3,
        question_text=(
            "Can teams discover and access enterprise knowledge sources for "
            "retrieval-augmented GenAI solutions without manual effort?"
        ),
    ),
    # adoption_scaling
    QuestionDefinition(
        dimension=Dimension.ADOPTION_SCALING,
        question_order=1,
        question_text=(
            "What share of GenAI pilots progress to production deployment?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.ADOPTION_SCALING,
        question_order=2,
        question_text=(
            "How widely are GenAI tools used in day-to-day work across business "
            "functions?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.ADOPTION_SCALING,
        question_order=3,
        question_text=(
            "Are successful GenAI solutions systematically reused and scaled to "
            "other teams or geographies?"
        ),
    ),
    # ai_trust
    QuestionDefinition(
        dimension=Dimension.AI_TRUST,
        question_order=1,
        question_text=(
            "Does the GCC operate under a published responsible-AI policy covering "
            "fairness, transparency, and accountability?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.AI_TRUST,
        question_order=2,
        question_text=(
            "How systematically are GenAI risks such as hallucination, data "
            "leakage, and prompt injection assessed before deployment?"
        ),
    ),
    QuestionDefinition(
        dimension=Dimension.AI_TRUST,
        question_order=3,
        question_text=(
            "Are GenAI outputs monitored in production with human oversight and "
            "clear escalation paths?"
        ),
    ),
]
