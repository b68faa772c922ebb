from .parser import BRANCH_KEYWORDS, DiagramParserState, parse_indented_diagram
from .serializer import to_indented_text

__all__ = ["BRANCH_KEYWORDS", "DiagramParserState", "parse_indented_diagram", "to_indented_text"]
