from typing import Iterable, List

from models import DiagramNode

from .parser import BRANCH_KEYWORDS, DEFAULT_SLOT

INDENT = "  "


def _node_lines(node: DiagramNode, depth: int) -> List[str]:
    pad = INDENT * depth
    line = f"{node.type}: {node.name}".rstrip()
    if line.lower() in BRANCH_KEYWORDS:
        # "else :" still reads as a node of type "else"
        line = f"{node.type} :"
    lines = [f"{pad}{line}"]
    branches = dict(node.branches())
    # Default children go last: nodes at depth + 1 would otherwise capture the
    # deeper keyword-slot nodes that follow them as their own children.
    # The parser resets the slot after every node, so each one needs its keyword.
    for slot in [s for s in branches if s != DEFAULT_SLOT]:
        for child in branches[slot]:
            lines.append(f"{pad}{INDENT}{slot}:")
            lines.extend(_node_lines(child, depth + 2))
    for child in branches.get(DEFAULT_SLOT, []):
        lines.extend(_node_lines(child, depth + 1))
    return lines


def to_indented_text(forest: Iterable[DiagramNode]) -> str:
    """Render a diagram forest back into the indented `Type: Name` text form."""
    lines: List[str] = []
    for node in forest:
        lines.extend(_node_lines(node, 0))
    return "\n".join(lines)
