import logging
from typing import Any, Dict

from core.exceptions import DiagramParseFailure
from diagram import parse_indented_diagram
from models import WorkflowSolution

from .solution_validator import parse_and_validate_solution

logger = logging.getLogger(__name__)


def normalize_diagram_field(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Replace the `diagram` string in place with its parsed forest."""
    diagram = raw.get("diagram")
    if isinstance(diagram, str) and diagram.strip():
        try:
            raw["diagram"] = parse_indented_diagram(diagram)
        except Exception as e:
            raise DiagramParseFailure(diagram, str(e)) from e
    else:
        if diagram:
            logger.warning(f"Ignoring non-string diagram of type {type(diagram).__name__}")
        raw["diagram"] = []
    return raw


def normalize_solution(raw: Dict[str, Any]) -> WorkflowSolution:
    return parse_and_validate_solution(normalize_diagram_field(raw))
