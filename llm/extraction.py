"""
Best-effort recovery of a JSON object from model output.

Models are inconsistent about wrapping: some replies come fenced in ```json,
some carry commentary around the object, some are clean. Strategies run in
order and the first one that parses wins.
"""

import json
import logging
import re
from typing import Any, Callable, List, Optional, Tuple

from core.exceptions import MalformedResponse

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)


def from_fenced_block(text: str) -> Optional[str]:
    match = _FENCED_JSON.search(text)
    if match and match.group(1):
        return match.group(1)
    return None


def from_brace_span(text: str) -> Optional[str]:
    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last > first:
        return text[first:last + 1]
    return None


def from_whole_text(text: str) -> Optional[str]:
    return text.strip()


Strategy = Tuple[str, Callable[[str], Optional[str]]]

STRATEGIES: List[Strategy] = [
    ("fenced_block", from_fenced_block),
    ("brace_span", from_brace_span),
    ("whole_text", from_whole_text),
]


def extract_json(text: str, strategies: Optional[List[Strategy]] = None) -> Any:
    """
    Return the first candidate that parses as JSON.

    Raises MalformedResponse carrying the raw text when every strategy fails.
    """
    for name, candidate_of in strategies or STRATEGIES:
        candidate = candidate_of(text)
        if candidate is None:
            continue
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.warning(f"Could not parse JSON from strategy '{name}', falling back: {e}")
            continue
        logger.debug(f"Extracted JSON with strategy '{name}' ({len(candidate)} of {len(text)} chars)")
        return parsed

    raise MalformedResponse(text)
