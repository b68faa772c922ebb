from typing import Any, Dict

from core.exceptions import MalformedResponse

from .extraction import extract_json


class LlmSolutionParser:
    """
    Adapter around the LLM output. The LLM is expected to return a stringified JSON
    object describing one workflow solution with fields: title, summary, diagram,
    components, variables, arguments. Fences and surrounding commentary are tolerated.
    """

    def parse(self, llm_text: str) -> Dict[str, Any]:
        """
        Parse the LLM output into a dictionary that can be normalized and validated.

        Raises MalformedResponse if no JSON object can be recovered.
        """
        payload = extract_json(llm_text)
        if not isinstance(payload, dict):
            raise MalformedResponse(llm_text)
        return payload
