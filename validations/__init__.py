from .normalizer import normalize_diagram_field, normalize_solution
from .solution_validator import UnknownStrategyError, parse_and_validate_solution, resolve_strategy

__all__ = [
    "UnknownStrategyError",
    "normalize_diagram_field",
    "normalize_solution",
    "parse_and_validate_solution",
    "resolve_strategy",
]
