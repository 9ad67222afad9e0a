"""GCC GenAI Maturity Assessment service.

Maturity diagnostic for Global Capability Centers: collects questionnaire
responses across seven dimensions, scores them, classifies the organisation
into a maturity archetype, and generates templated recommendations.
"""

__version__ = "0.1.0"
