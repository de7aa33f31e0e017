"""Adapter exposing clang.cindex cursors through the DeclarationNode interface."""

from typing import Iterator, List, Optional
import logging

import clang.cindex as ci

from ..models.node import DeclarationNode, NodeKind

logger = logging.getLogger(__name__)


# CursorKind -> NodeKind; everything else maps to NodeKind.OTHER
_KIND_MAP = {
    ci.CursorKind.TRANSLATION_UNIT: NodeKind.TRANSLATION_UNIT,
    ci.CursorKind.FUNCTION_DECL: NodeKind.FUNCTION_DECLARATION,
    ci.CursorKind.VAR_DECL: NodeKind.VARIABLE_DECLARATION,
}


class CursorNode(DeclarationNode):
    """DeclarationNode backed by a libclang cursor.

    The wrapped cursor keeps its translation unit alive, so a CursorNode
    must not outlive the scope that opened the translation unit.
    """

    def __init__(self, cursor):
        """Wrap a cursor.

        Args:
            cursor: clang.cindex.Cursor
        """
        self._cursor = cursor
        self.kind = _KIND_MAP.get(cursor.kind, NodeKind.OTHER)
        self.spelling = cursor.spelling or ""

        location = cursor.location
        self.file_path = location.file.name if location.file else ""
        self.line = location.line
        self.column = location.column

    @property
    def semantic_parent(self) -> Optional["CursorNode"]:
        parent = self._cursor.semantic_parent
        if parent is None:
            return None
        return CursorNode(parent)

    def token_spellings(self) -> List[str]:
        try:
            return [token.spelling for token in self._cursor.get_tokens()]
        except Exception as e:
            logger.debug(f"Failed to tokenize {self.spelling}: {e}")
            return []

    def children(self) -> Iterator["CursorNode"]:
        for child in self._cursor.get_children():
            yield CursorNode(child)
