"""Mermaid flowchart writer."""

from __future__ import annotations

from typing import Mapping

from gotestdeps.analysis.graph_models import RenderedGraph
from gotestdeps.models import CLASSIFICATION_ORDER, Classification
from gotestdeps.render.layout import group_members

_INDENT = "    "


def _label(module_path: str) -> str:
    return '"' + module_path.replace('"', "#quot;") + '"'


def render_mermaid(
    rendered: RenderedGraph,
    styles: Mapping[Classification, str | None],
) -> str:
    """Serialize a laid-out graph as a left-to-right Mermaid flowchart.

    A classification gets a ``classDef``/``class`` pair only if it has a
    fill colour in ``styles`` and at least one member.
    """
    lines = ["graph LR"]

    for node in rendered.nodes:
        lines.append(f"{_INDENT}{node.node_id}[{_label(node.module_path)}]")

    for source, target in rendered.edges:
        lines.append(f"{_INDENT}N{source} --> N{target}")

    for classification in CLASSIFICATION_ORDER:
        fill = styles.get(classification)
        members = group_members(rendered, classification)
        if not fill or not members:
            continue
        name = classification.value
        lines.append(f"{_INDENT}classDef {name} fill:{fill},stroke:#333,stroke-width:1px;")
        lines.append(f"{_INDENT}class {','.join(f'N{i}' for i in members)} {name};")

    return "\n".join(lines) + "\n"
