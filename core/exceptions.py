"""Error kinds raised while turning model output into workflow solutions."""

from typing import Any, Dict, Optional

from pydantic import ValidationError

MALFORMED_DATA_MESSAGE = "The AI model returned an invalid data structure. Please try again."


class WorkflowGenerationError(Exception):
    """Base exception for workflow generation failures."""

    def __init__(self, message: str = "Workflow generation failed", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MalformedResponse(WorkflowGenerationError):
    """Raised when no extraction strategy recovers JSON from the model text."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        super().__init__(f"Model returned malformed JSON. Raw text: {raw_text}", {"raw_text": raw_text})


class DiagramParseFailure(WorkflowGenerationError):
    """Raised when the indented diagram text cannot be turned into a tree."""

    def __init__(self, raw_diagram: str, reason: str = ""):
        self.raw_diagram = raw_diagram
        super().__init__(
            f"Failed to parse diagram text. Raw string: {raw_diagram}. Error: {reason}",
            {"raw_diagram": raw_diagram},
        )


class PairGenerationFailure(WorkflowGenerationError):
    """Raised when either strategy pipeline fails; no partial pair is returned."""

    def __init__(self, strategy: str, cause: BaseException):
        self.strategy = strategy
        self.cause = cause
        message = MALFORMED_DATA_MESSAGE if self.is_malformed else str(cause)
        super().__init__(message, {"strategy": strategy, "cause": type(cause).__name__})

    @property
    def is_malformed(self) -> bool:
        return isinstance(self.cause, (MalformedResponse, ValidationError))
