"""
Parser for the indented diagram text the model returns in the `diagram` field.

    Sequence: Main Sequence
      If: Credentials Found
        then:
          Log Message: Login Successful
        else:
          Throw: Credentials Invalid

Each line is `Type: Name`. Nesting is read from leading spaces, compared only
relative to the open ancestors, so odd indentation degrades instead of failing.
The lines `then:`, `else:` and `body:` select the slot the next node lands in.
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import List, Tuple

from models import DiagramNode

BRANCH_KEYWORDS = {
    "then:": "then",
    "else:": "else",
    "body:": "body",
}

DEFAULT_SLOT = "children"
UNKNOWN_TYPE = "Unknown"


def indentation(line: str) -> int:
    return len(line) - len(line.lstrip())


def parse_node_line(content: str) -> DiagramNode:
    """Split `Type: Name` on the first colon. Later colons belong to the name."""
    node_type, _, name = content.partition(":")
    return DiagramNode(type=node_type.strip() or UNKNOWN_TYPE, name=name.strip())


@dataclass
class DiagramParserState:
    roots: List[DiagramNode] = field(default_factory=list)
    stack: List[Tuple[DiagramNode, int]] = field(default_factory=list)
    pending_slot: str = DEFAULT_SLOT

    def feed(self, line: str) -> "DiagramParserState":
        content = line.strip()
        keyword_slot = BRANCH_KEYWORDS.get(content.lower())
        if keyword_slot is not None:
            # keyword lines never touch the stack, whatever their indentation
            self.pending_slot = keyword_slot
            return self

        indent = indentation(line)
        while self.stack and self.stack[-1][1] >= indent:
            self.stack.pop()

        node = parse_node_line(content)
        if self.stack:
            parent = self.stack[-1][0]
            parent.append_to_slot(self.pending_slot, node)
        else:
            self.roots.append(node)

        self.stack.append((node, indent))
        self.pending_slot = DEFAULT_SLOT
        return self


def diagram_lines(text: str) -> List[str]:
    return [line for line in text.splitlines() if line.strip()]


def parse_indented_diagram(text: str) -> List[DiagramNode]:
    """
    Build the diagram forest from indented text. Never raises on bad nesting;
    empty or blank input gives an empty forest.
    """
    if not text:
        return []
    state = reduce(lambda acc, line: acc.feed(line), diagram_lines(text), DiagramParserState())
    return state.roots
