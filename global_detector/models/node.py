"""AST node interface consumed by the classifiers and the traversal."""

from enum import Enum
from typing import Iterable, List, Optional


class NodeKind(Enum):
    """Node kinds the detector distinguishes."""
    TRANSLATION_UNIT = "translation_unit"
    FUNCTION_DECLARATION = "function_declaration"
    VARIABLE_DECLARATION = "variable_declaration"
    OTHER = "other"


class DeclarationNode:
    """Read-only view of one AST node.

    Parser backends subclass this and fill in the attributes. The
    detector never mutates a node.

    Attributes:
        kind: NodeKind of the node
        spelling: Identifier name (empty for unnamed nodes)
        file_path: File the node was found in ("" when unknown)
        line: 1-indexed line
        column: 1-indexed column
    """

    kind: NodeKind = NodeKind.OTHER
    spelling: str = ""
    file_path: str = ""
    line: int = 0
    column: int = 0

    @property
    def semantic_parent(self) -> Optional["DeclarationNode"]:
        """Semantic parent node, or None at the root."""
        return None

    def token_spellings(self) -> List[str]:
        """Spellings of the tokens covering the node's source extent."""
        return []

    def children(self) -> Iterable["DeclarationNode"]:
        """Direct children in source order."""
        return ()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.kind.name}, {self.spelling!r}, "
            f"{self.file_path}:{self.line}:{self.column})"
        )
