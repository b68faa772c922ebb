from typing import Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

BRANCH_SLOTS = ("children", "then", "else", "body")

_DIRECTIONS = {"in": "In", "out": "Out", "inout": "InOut"}


class DiagramNode(BaseModel):
    """
    One step or container in a workflow diagram. Branch slots stay None until
    the first child is attached to them.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Activity category, e.g. Sequence, If, For Each")
    name: str = Field(..., description="Display name of the activity")
    description: Optional[str] = None
    children: Optional[List["DiagramNode"]] = None
    then: Optional[List["DiagramNode"]] = None
    else_: Optional[List["DiagramNode"]] = Field(default=None, alias="else")
    body: Optional[List["DiagramNode"]] = None

    @staticmethod
    def slot_attribute(slot: str) -> str:
        # "else" is a keyword, so the attribute carries a trailing underscore
        return "else_" if slot == "else" else slot

    def get_slot(self, slot: str) -> Optional[List["DiagramNode"]]:
        return getattr(self, self.slot_attribute(slot))

    def append_to_slot(self, slot: str, node: "DiagramNode") -> None:
        if slot not in BRANCH_SLOTS:
            raise ValueError(f"Unknown branch slot: {slot}")
        nodes = self.get_slot(slot)
        if nodes is None:
            nodes = []
            setattr(self, self.slot_attribute(slot), nodes)
        nodes.append(node)

    def branches(self) -> Iterator[Tuple[str, List["DiagramNode"]]]:
        """Yield (slot, nodes) for populated slots; empty and absent slots are skipped."""
        for slot in BRANCH_SLOTS:
            nodes = self.get_slot(slot)
            if nodes:
                yield slot, nodes

    def walk(self) -> Iterator["DiagramNode"]:
        yield self
        for _, nodes in self.branches():
            for node in nodes:
                yield from node.walk()


class ComponentDetail(BaseModel):
    name: str
    package: str
    description: str


class VariableDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    scope: str
    default_value: Optional[str] = Field(default=None, alias="defaultValue")

    @field_validator("default_value", mode="before")
    @classmethod
    def scalar_default_as_text(cls, value):
        # models often emit 0 or false unquoted
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value


class ArgumentDetail(BaseModel):
    name: str
    direction: Literal["In", "Out", "InOut"]
    type: str
    description: str

    @field_validator("direction", mode="before")
    @classmethod
    def canonical_direction(cls, value):
        if isinstance(value, str):
            key = value.replace("/", "").replace("-", "").replace(" ", "").lower()
            return _DIRECTIONS.get(key, value)
        return value


class WorkflowSolution(BaseModel):
    title: str = Field(..., description="Short title of the proposed workflow")
    summary: str = Field(..., description="Free-text explanation of the approach")
    diagram: List[DiagramNode] = Field(default_factory=list, description="Forest of diagram nodes")
    components: List[ComponentDetail]
    variables: List[VariableDetail]
    arguments: List[ArgumentDetail]


class SolutionPair(BaseModel):
    """AI-centric and traditional solutions generated together for one description."""

    model_config = ConfigDict(populate_by_name=True)

    ai_solution: WorkflowSolution = Field(..., alias="aiSolution")
    traditional_solution: WorkflowSolution = Field(..., alias="traditionalSolution")

    def by_strategy(self, strategy: str) -> WorkflowSolution:
        solutions = {
            "ai-centric": self.ai_solution,
            "traditional": self.traditional_solution,
        }
        return solutions[strategy]
