"""Rendering pipeline: hierarchy script -> rendered outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from doxtree.config import DOXTREE_EXPAND_DEPTH, DOXTREE_VARIABLE_NAME
from doxtree.fetch import is_url, load_hierarchy_source
from doxtree.filters import filter_forest
from doxtree.html_renderer import DEFAULT_PAGE_TITLE
from doxtree.js_parser import parse_hierarchy_js
from doxtree.links import DirectoryLinkResolver
from doxtree.model import TreeModel
from doxtree.output_formatter import format_hierarchy
from doxtree.renderer import render
from doxtree.schemas import HierarchyDocument, RenderedTree
from doxtree.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RenderOptions:
    """Options for rendering a hierarchy.

    Attributes:
        expand_depth: Nodes shallower than this start expanded.
        filter_mode: Label filter mode ("include" or "exclude").
        labels: Labels to include or exclude.
        docs_dir: Documentation directory to check links against. Setting it
            turns link checking on.
        validate_links: If True, check links against ``docs_dir``, or the
            directory of a local hierarchy file. Unresolved links render as
            plain text.
        variable: Name of the variable holding the hierarchy in the script.
        title: Page title for the HTML output.
    """

    expand_depth: int = DOXTREE_EXPAND_DEPTH
    filter_mode: Literal["include", "exclude"] = "exclude"
    labels: list[str] = field(default_factory=list)
    docs_dir: Path | None = None
    validate_links: bool = False
    variable: str = DOXTREE_VARIABLE_NAME
    title: str = DEFAULT_PAGE_TITLE


async def render_hierarchy(
    location: str | Path,
    options: RenderOptions | None = None,
) -> tuple[HierarchyDocument, RenderedTree, dict[str, int | str | list[str]]]:
    """Load, parse, filter and render a hierarchy script.

    Args:
        location: Local path or URL of the hierarchy script.
        options: Processing options. Uses defaults if None.

    Returns:
        Tuple of (document, rendered tree, metadata).

    Raises:
        FetchError: If the source cannot be loaded.
        MalformedTreeError: If the source is not a well-formed hierarchy.
    """
    opts = options or RenderOptions()
    text = await load_hierarchy_source(location)
    forest = TreeModel.from_raw(parse_hierarchy_js(text, variable=opts.variable))
    forest = filter_forest(forest, mode=opts.filter_mode, selected=opts.labels)

    resolver = None
    docs_dir = opts.docs_dir
    if docs_dir is None and opts.validate_links and not is_url(str(location)):
        docs_dir = Path(location).expanduser().parent
    if docs_dir is not None:
        resolver = DirectoryLinkResolver(docs_dir)

    tree = render(forest, expand_depth=opts.expand_depth, link_resolver=resolver)
    document = format_hierarchy(forest, tree, title=opts.title, source=str(location))

    logger.info(
        "Rendered hierarchy",
        extra={
            "source": str(location),
            "roots": len(forest),
            "nodes": tree.node_count,
            "unresolved_links": len(tree.unresolved_links),
        },
    )

    metadata: dict[str, int | str | list[str]] = {
        "source": str(location),
        "roots": len(forest),
        "nodes": tree.node_count,
        "max_depth": forest.max_depth(),
        "unresolved_links": list(tree.unresolved_links),
    }
    return document, tree, metadata
