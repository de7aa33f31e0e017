"""libclangを使用したグローバル変数検出モジュール。"""

from .clang_analyzer import ClangAnalyzer, ClangParseError, ClangSetupError
from .classifiers import has_const_qualifier, is_excluded, is_global
from .cursor_node import CursorNode
from .traversal import traverse

__all__ = [
    "ClangAnalyzer",
    "ClangParseError",
    "ClangSetupError",
    "CursorNode",
    "has_const_qualifier",
    "is_excluded",
    "is_global",
    "traverse",
]
