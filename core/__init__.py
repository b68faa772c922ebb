from .config import Settings, get_settings
from .exceptions import (
    MALFORMED_DATA_MESSAGE,
    DiagramParseFailure,
    MalformedResponse,
    PairGenerationFailure,
    WorkflowGenerationError,
)

__all__ = [
    "MALFORMED_DATA_MESSAGE",
    "DiagramParseFailure",
    "MalformedResponse",
    "PairGenerationFailure",
    "Settings",
    "WorkflowGenerationError",
    "get_settings",
]
