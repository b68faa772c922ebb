from .extraction import STRATEGIES, extract_json
from .openai_client import OpenAIWorkflowLLM
from .parser import LlmSolutionParser

__all__ = ["STRATEGIES", "LlmSolutionParser", "OpenAIWorkflowLLM", "extract_json"]
