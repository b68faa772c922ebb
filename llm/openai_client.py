from typing import Dict, List, Optional

from openai import AsyncOpenAI

from core.config import Settings, get_settings
from registry import Registry

DIAGRAM_RULES = """**Diagram as Indented Text (CRITICAL):**
- The 'diagram' field in the final JSON output MUST be a STRING.
- This string must contain the workflow diagram represented as simple indented text.
- Use two spaces for each level of indentation.
- Each line should follow the format: `ActivityType: Display Name`
- For container activities like 'If', use special keywords on their own indented lines to denote branches: `then:`, `else:`.
- For loops like 'For Each', use the keyword `body:` on its own indented line.

**Example Diagram Format:**
```
Sequence: Main Sequence
  Assign: Get User Credentials
  If: Credentials Found
    then:
      Log Message: Login Successful
    else:
      Throw: Credentials Invalid Exception
  For Each: Data Row in DataTable
    body:
      Type Into: Enter Row Data
```
This text format is simple and less error-prone. Adhere to it strictly."""

TRADITIONAL_GUIDANCE = """**Crucial Guidance for difficult requests:**
- For the 'traditional' solution: If the user asks for a non-AI solution to a problem that is typically best solved with AI (like verifying handwriting, unstructured images, or complex PDFs), you MUST still provide a viable traditional workflow.
- Propose the best possible non-AI alternative using official packages. This might involve techniques like using OCR activities on specific screen regions to check for the presence of *any* text, or using 'Find Image' activities to locate anchors.
- You should acknowledge the potential brittleness or limitations of these non-AI methods in the 'summary' field of your response."""

OUTPUT_RULES = """**Final Output Rules (ABSOLUTE):**
- Your ENTIRE response MUST be ONLY the JSON object itself.
- DO NOT include markdown fences (```json), explanations, introductions, or any text outside of the primary JSON structure.
- The output must be directly parsable by a standard JSON parser."""

SCHEMA_HINT = (
    '{\n'
    '  "title": "<string>",\n'
    '  "summary": "<string>",\n'
    '  "diagram": "<indented diagram text>",\n'
    '  "components": [{"name": "<activity>", "package": "<package>", "description": "<string>"}, ...],\n'
    '  "variables": [{"name": "<string>", "type": "<.NET type>", "scope": "<string>", "defaultValue": "<optional>"}, ...],\n'
    '  "arguments": [{"name": "<string>", "direction": "In|Out|InOut", "type": "<.NET type>", "description": "<string>"}, ...]\n'
    '}'
)


class OpenAIWorkflowLLM:
    """
    Thin wrapper around OpenAI chat completion to turn a process description into the
    stringified JSON payload for one workflow solution.
    """

    def __init__(self, model: Optional[str] = None, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        api_key = self.settings.OPENAI_API_KEY
        # AsyncOpenAI() will also read from env, but we inject explicitly from our .env-based configuration.
        self.client = AsyncOpenAI(api_key=api_key) if api_key else AsyncOpenAI()
        self.model = model or self.settings.OPENAI_MODEL

    def _build_system_instruction(self, strategy_instruction: str) -> str:
        return (
            "You are an expert UiPath RPA architect with deep knowledge of all official UiPath products, "
            "services, and best practices. Your knowledge is strictly based on official UiPath documentation "
            "and officially supported sources.\n"
            "Your task is to analyze a user's process description and design the optimal RPA workflow "
            "based on a specific approach.\n"
            f"{strategy_instruction}\n\n"
            f"{DIAGRAM_RULES}\n\n"
            f"{TRADITIONAL_GUIDANCE}\n\n"
            f"Respond with JSON shaped like:\n{SCHEMA_HINT}\n\n"
            f"{OUTPUT_RULES}"
        )

    def _build_messages(
        self,
        description: str,
        allow_marketplace: bool,
        strategy: str,
        registries: Dict[str, Registry],
    ) -> List[Dict[str, str]]:
        strategy_item = registries["strategy"].get(strategy)
        policy_item = registries["package_policy"].get("marketplace" if allow_marketplace else "official")

        user_prompt = (
            f'Process Description: "{description}"\n\n'
            f"Package Preference: {policy_item.prompt_text}\n\n"
            "Generate the specified workflow solution now."
        )
        return [
            {"role": "system", "content": self._build_system_instruction(strategy_item.prompt_text)},
            {"role": "user", "content": user_prompt},
        ]

    async def generate_solution_json(
        self,
        description: str,
        allow_marketplace: bool,
        strategy: str,
        registries: Dict[str, Registry],
    ) -> str:
        messages = self._build_messages(description, allow_marketplace, strategy, registries)
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.settings.OPENAI_TEMPERATURE,
            response_format={"type": "json_object"},
        )
        return (response.choices[0].message.content or "").strip()
