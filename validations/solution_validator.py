from typing import Any, Dict

from models import WorkflowSolution
from registry import Registry, RegistryItem


class UnknownStrategyError(ValueError):
    """Raised when a generation strategy tag is not registered."""


def resolve_strategy(strategy: str, registries: Dict[str, Registry]) -> RegistryItem:
    if strategy not in registries["strategy"]:
        known = ", ".join(registries["strategy"].keys())
        raise UnknownStrategyError(f"Unknown generation strategy: {strategy} (expected one of: {known})")
    return registries["strategy"].get(strategy)


def parse_and_validate_solution(payload: Dict[str, Any]) -> WorkflowSolution:
    """
    Convert a normalized payload (diagram already a forest) into WorkflowSolution.
    Raises pydantic ValidationError when a required field is missing or malformed.
    """
    return WorkflowSolution.model_validate(payload)
