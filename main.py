import asyncio
import logging
import sys
from typing import Dict, Optional

from openai import OpenAIError

from core.config import get_settings
from core.exceptions import PairGenerationFailure, WorkflowGenerationError
from llm import LlmSolutionParser, OpenAIWorkflowLLM
from models import SolutionPair, WorkflowSolution
from registry import Registry, create_default_registries
from validations import normalize_solution, resolve_strategy

logger = logging.getLogger(__name__)

AI_CENTRIC = "ai-centric"
TRADITIONAL = "traditional"


def orchestrate_user_input(llm_text: str) -> WorkflowSolution:
    """
    Turn one raw model response into a WorkflowSolution:
    1. Salvage the JSON object from the text.
    2. Parse the indented diagram string into a tree.
    3. Validate against the WorkflowSolution schema.
    """
    parsed_payload = LlmSolutionParser().parse(llm_text)
    return normalize_solution(parsed_payload)


def orchestrate_llm_output(ai_text: str, traditional_text: str) -> SolutionPair:
    """Pair two already-captured model responses without calling the model."""
    solutions = {}
    for strategy, text in ((AI_CENTRIC, ai_text), (TRADITIONAL, traditional_text)):
        try:
            solutions[strategy] = orchestrate_user_input(text)
        except Exception as e:
            raise PairGenerationFailure(strategy, e) from e
    return SolutionPair(ai_solution=solutions[AI_CENTRIC], traditional_solution=solutions[TRADITIONAL])


async def generate_solution(
    description: str,
    allow_marketplace: bool,
    strategy: str,
    llm: Optional[OpenAIWorkflowLLM] = None,
    registries: Optional[Dict[str, Registry]] = None,
) -> WorkflowSolution:
    """
    One strategy pipeline: request the model, salvage its JSON and normalize it.
    Any failure is wrapped in PairGenerationFailure tagged with the strategy.
    """
    registries = registries or create_default_registries()
    resolve_strategy(strategy, registries)
    llm = llm or OpenAIWorkflowLLM()
    try:
        llm_text = await llm.generate_solution_json(description, allow_marketplace, strategy, registries)
        solution = orchestrate_user_input(llm_text)
    except Exception as e:
        logger.error(f"Failed to generate '{strategy}' solution: {e}")
        raise PairGenerationFailure(strategy, e) from e
    logger.info(f"Generated '{strategy}' solution '{solution.title}' with {len(solution.diagram)} root nodes")
    return solution


async def generate_pair(
    description: str,
    allow_marketplace: bool,
    llm: Optional[OpenAIWorkflowLLM] = None,
) -> SolutionPair:
    """
    Generate the AI-centric and traditional solutions concurrently.

    Both must succeed. The first failure is raised as PairGenerationFailure and
    whatever the other pipeline produces is discarded.
    """
    registries = create_default_registries()
    llm = llm or OpenAIWorkflowLLM()
    logger.info(f"Generating solution pair (marketplace={'allowed' if allow_marketplace else 'official only'})")
    ai_solution, traditional_solution = await asyncio.gather(
        generate_solution(description, allow_marketplace, AI_CENTRIC, llm, registries),
        generate_solution(description, allow_marketplace, TRADITIONAL, llm, registries),
    )
    return SolutionPair(ai_solution=ai_solution, traditional_solution=traditional_solution)


def orchestrate_natural_language(user_input: str, allow_marketplace: bool = False) -> SolutionPair:
    """
    Full pipeline starting from natural language:
    1. Send the description to OpenAI twice, once per strategy, concurrently.
    2. Salvage and normalize each response.
    3. Return both as a SolutionPair.
    """
    return asyncio.run(generate_pair(user_input, allow_marketplace))


def main(argv: Optional[list] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    allow_marketplace = "--marketplace" in args
    args = [arg for arg in args if arg != "--marketplace"]

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args:
        # If command-line arguments are provided, use them as the process description
        user_input = " ".join(args)
    else:
        # Interactive mode: prompt user for input
        print("Describe the process you want to automate:")
        print("(Or provide it as a command-line argument)")
        user_input = input("> ").strip()

    if not user_input:
        print("No input provided. Exiting.")
        return 1

    try:
        pair = orchestrate_natural_language(user_input, allow_marketplace)
    except WorkflowGenerationError as e:
        print(f"Error: {e.message}")
        return 1
    except OpenAIError as e:
        # raised while building the client, e.g. when no API key is configured
        print(f"Error: {e}")
        return 1

    print(pair.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
