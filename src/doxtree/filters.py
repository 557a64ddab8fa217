"""Label filtering for hierarchy forests."""

from __future__ import annotations

import re
from typing import Iterable

from doxtree.model import TreeModel
from doxtree.schemas import TreeNode

FILTER_MODES = ("include", "exclude")


def normalize_label(label: str) -> str:
    """Normalize labels for comparison."""
    return re.sub(r"\s+", " ", label.strip()).casefold()


def filter_forest(
    forest: TreeModel,
    *,
    mode: str = "exclude",
    selected: Iterable[str] | None = None,
) -> TreeModel:
    """Filter node occurrences by label using include or exclude mode.

    ``exclude`` removes every matching occurrence together with its subtree.
    ``include`` keeps matching occurrences with their whole subtree plus the
    ancestors leading to them.
    """
    if mode not in FILTER_MODES:
        raise ValueError(f"Unknown filter mode {mode!r}; expected one of {FILTER_MODES}")
    selected_labels = {normalize_label(label) for label in (selected or []) if label.strip()}
    if not selected_labels:
        return forest

    def _filter(nodes: Iterable[TreeNode]) -> list[TreeNode]:
        result: list[TreeNode] = []
        for node in nodes:
            in_selected = normalize_label(node.label) in selected_labels
            if mode == "include":
                if in_selected:
                    result.append(node)
                else:
                    children = _filter(node.children)
                    if children:
                        result.append(node.model_copy(update={"children": tuple(children)}))
            else:
                if in_selected:
                    continue
                result.append(node.model_copy(update={"children": tuple(_filter(node.children))}))
        return result

    return TreeModel(roots=tuple(_filter(forest)))
