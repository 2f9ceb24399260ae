"""Exceptions raised inside the plan generation pipeline.

None of these reach callers of ``PlanGenerator.generate``; each one has a
recovery path at the orchestrator boundary.
"""


class PlanPipelineError(Exception):
    """Base class for recoverable pipeline errors."""


class MissingCredentialError(PlanPipelineError):
    """No provider API key is configured. Routes to the offline plan."""


class NoAvailableModelError(PlanPipelineError):
    """Every candidate model failed its probe. Routes to the offline plan."""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        super().__init__(
            f"No working model found among {self.candidates}. "
            "Please check your API key and internet connection."
        )


class ExtractionError(PlanPipelineError):
    """Provider text did not contain a parseable JSON object."""
