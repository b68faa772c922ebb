from .workflow import (
    BRANCH_SLOTS,
    ArgumentDetail,
    ComponentDetail,
    DiagramNode,
    SolutionPair,
    VariableDetail,
    WorkflowSolution,
)

__all__ = [
    "BRANCH_SLOTS",
    "ArgumentDetail",
    "ComponentDetail",
    "DiagramNode",
    "SolutionPair",
    "VariableDetail",
    "WorkflowSolution",
]
