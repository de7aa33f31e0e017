"""Data models for global variable detection."""

from .finding import Finding, SourceLocation
from .node import DeclarationNode, NodeKind

__all__ = [
    "Finding",
    "SourceLocation",
    "DeclarationNode",
    "NodeKind",
]
