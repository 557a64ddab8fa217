"""doxtree: render Doxygen class hierarchies as collapsible trees."""

from doxtree.exceptions import (
    DoxtreeError,
    FetchError,
    MalformedTreeError,
    SourceNotFoundError,
    UnknownNodeReferenceError,
)
from doxtree.expansion import ExpansionState
from doxtree.filters import filter_forest
from doxtree.html_parser import parse_rendered_html
from doxtree.html_renderer import render_html, render_page
from doxtree.js_parser import parse_hierarchy_js
from doxtree.model import TreeModel
from doxtree.pipeline import RenderOptions, render_hierarchy
from doxtree.renderer import render, render_json, render_text
from doxtree.schemas import HierarchyDocument, NodeState, RenderedNode, RenderedTree, TreeNode

__all__ = [
    "DoxtreeError",
    "ExpansionState",
    "FetchError",
    "HierarchyDocument",
    "MalformedTreeError",
    "NodeState",
    "RenderOptions",
    "RenderedNode",
    "RenderedTree",
    "SourceNotFoundError",
    "TreeModel",
    "TreeNode",
    "UnknownNodeReferenceError",
    "filter_forest",
    "parse_hierarchy_js",
    "parse_rendered_html",
    "render",
    "render_hierarchy",
    "render_html",
    "render_json",
    "render_page",
    "render_text",
]
