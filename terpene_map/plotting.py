from typing import Dict, List, Optional

import plotly.graph_objects as go

from .labels import LabelProvider
from .models import NodeType, SunburstNode

# ============================================================
# Configuration / constants
# ============================================================

ROOT_COLOR = "#ECEFF1"

HOVER_TEMPLATE_SUNBURST = (
    "<b>%{label}</b><br>"
    "Terpenes: %{value}<br>"
    "%{percentParent:.0%} of parent<extra></extra>"
)


# ============================================================
# Helper functions
# ============================================================


def _node_id(node: SunburstNode, parent_id: str) -> str:
    """
    Path-style id; a terpene listed under several effects gets one id per effect.
    """
    if node.type is NodeType.ROOT:
        return "root"
    key = node.id if node.type is NodeType.TERPENE else node.name
    return f"{parent_id}/{node.type.value}:{key}"


def flatten_tree(
    tree: SunburstNode, labels: Optional[LabelProvider] = None
) -> Dict[str, List]:
    """
    Flatten the hierarchy into the parallel arrays ``go.Sunburst`` expects.

    Returns
    -------
    Dict[str, List]
        Keys ``ids``, ``parents``, ``labels``, ``values``, ``colors`` and
        ``customdata`` (terpene id for leaves, empty string otherwise).
    """
    labels = labels or LabelProvider()
    columns: Dict[str, List] = {
        "ids": [],
        "parents": [],
        "labels": [],
        "values": [],
        "colors": [],
        "customdata": [],
    }

    stack = [(tree, "")]
    while stack:
        node, parent_id = stack.pop()
        node_id = _node_id(node, parent_id)

        if node.type is NodeType.EFFECT:
            label = labels.effect_label(node.name)
        else:
            label = node.name

        columns["ids"].append(node_id)
        columns["parents"].append(parent_id)
        columns["labels"].append(label)
        columns["values"].append(node.value)
        columns["colors"].append(node.color or ROOT_COLOR)
        columns["customdata"].append(node.id or "")

        # Reverse so children come out in their stored order.
        for child in reversed(node.children or ()):
            stack.append((child, node_id))

    return columns


# ============================================================
# Main plotting function
# ============================================================


def create_sunburst_plot(
    tree: SunburstNode,
    labels: Optional[LabelProvider] = None,
    *,
    height: int = 700,
) -> go.Figure:
    """
    Build the effect sunburst for a catalog hierarchy.

    Parameters
    ----------
    tree : SunburstNode
        Root node from :func:`terpene_map.aggregation.build_tree`.
    labels : LabelProvider | None, default None
        Resolves effect display names for the active locale.
    height : int, default 700
        Figure height in pixels.

    Returns
    -------
    go.Figure
        A Plotly Figure; empty when the tree has no effect nodes.
    """
    if not tree.children:
        # Nothing to draw
        return go.Figure()

    data = flatten_tree(tree, labels)

    fig = go.Figure(
        go.Sunburst(
            ids=data["ids"],
            parents=data["parents"],
            labels=data["labels"],
            values=data["values"],
            customdata=data["customdata"],
            branchvalues="total",
            marker=dict(colors=data["colors"], line=dict(color="#ffffff", width=1)),
            hovertemplate=HOVER_TEMPLATE_SUNBURST,
            insidetextorientation="radial",
        )
    )
    fig.update_layout(
        height=height,
        margin=dict(t=10, l=10, r=10, b=10),
    )
    return fig
