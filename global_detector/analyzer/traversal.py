"""Depth-first search for global variable declarations."""

from typing import Iterator, List, Sequence
import logging

from ..models.finding import Finding
from ..models.node import DeclarationNode, NodeKind
from .classifiers import has_const_qualifier, is_excluded, is_global

logger = logging.getLogger(__name__)


def traverse(
    root: DeclarationNode,
    exclusions: Sequence[str]
) -> Iterator[Finding]:
    """Yield a Finding for every global variable below ``root``.

    Walks the whole tree in pre-order. Children are visited whatever the
    outcome for their parent, so every qualifying declaration is reported.
    The walk keeps its own stack of child iterators, so deeply nested
    expressions do not hit the interpreter recursion limit.

    Args:
        root: Root node, normally the translation unit
        exclusions: Path substrings whose declarations are ignored

    Yields:
        Finding per global variable, in source order
    """
    if _is_reportable(root, exclusions):
        yield Finding.from_node(root)

    stack: List[Iterator[DeclarationNode]] = [iter(root.children())]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue

        if _is_reportable(node, exclusions):
            yield Finding.from_node(node)

        stack.append(iter(node.children()))


def _is_reportable(node: DeclarationNode, exclusions: Sequence[str]) -> bool:
    """Apply the scope, token and path filters in that order."""
    if node.kind != NodeKind.VARIABLE_DECLARATION:
        return False

    if not is_global(node):
        logger.debug(f"Skipping local or parameter: {node.spelling}")
        return False

    if has_const_qualifier(node):
        logger.debug(f"Skipping const declaration: {node.spelling}")
        return False

    if is_excluded(node.file_path, exclusions):
        return False

    return True
