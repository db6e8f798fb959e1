"""
Graphviz layouts as input to the renderer.

Graphviz does the layout; its ``json`` output carries the final geometry as
xdot drawing operations (``_draw_``, ``_ldraw_``...) for the graph, every
subgraph, node and edge. This module runs Graphviz through the ``graphviz``
package and reads that output into a ``LayoutGraph``.

Requirements:
    Laying out DOT source needs the Graphviz executables:
    - macOS: brew install graphviz
    - Ubuntu/Debian: sudo apt-get install graphviz
    - Windows: Download from https://graphviz.org/download/
"""

import json
import logging
import subprocess
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

import graphviz

from gvsvg.core.types import Box, Point


logger = logging.getLogger(__name__)


__all__ = ["LayoutError", "LayoutObject", "LayoutCluster", "LayoutEdge", "LayoutGraph", "layout_json"]


# xdot attributes holding drawing operations, in drawing order
DRAW_KEYS = ("_draw_", "_ldraw_", "_hdraw_", "_tdraw_", "_hldraw_", "_tldraw_", "_xldraw_")

_STRUCTURAL_KEYS = {
    "name", "directed", "strict", "objects", "edges", "subgraphs", "nodes",
    "_gvid", "_subgraph_cnt", "tail", "head", "bb", "xdotversion",
} | set(DRAW_KEYS)


class LayoutError(ValueError):
    """Raised when a layout cannot be read."""


def _parse_bb(value: Any) -> Box:
    try:
        llx, lly, urx, ury = (float(v) for v in str(value).split(","))
    except ValueError:
        raise LayoutError(f"Invalid bounding box: {value!r}") from None
    return Box(Point(llx, lly), Point(urx, ury))


def _parse_points(op: Dict[str, Any]) -> List[Point]:
    try:
        points = [Point(float(x), float(y)) for x, y in op["points"]]
    except (KeyError, TypeError, ValueError):
        raise LayoutError(f"Invalid points in draw operation: {op!r}") from None
    if not points:
        raise LayoutError(f"Draw operation without points: {op!r}")
    return points


def _check_ops(ops: Any, owner: str) -> List[Dict[str, Any]]:
    if not isinstance(ops, list) or not all(isinstance(op, dict) and "op" in op for op in ops):
        raise LayoutError(f"Invalid drawing operations on {owner}")
    for op in ops:
        if op["op"] in ("p", "P", "b", "B", "L"):
            op["points"] = _parse_points(op)
        elif op["op"] in ("e", "E"):
            try:
                x, y, w, h = (float(v) for v in op["rect"])
            except (KeyError, TypeError, ValueError):
                raise LayoutError(f"Invalid ellipse on {owner}: {op!r}") from None
            op["rect"] = (x, y, w, h)
        elif op["op"] == "T":
            try:
                op["pt"] = Point(float(op["pt"][0]), float(op["pt"][1]))
            except (KeyError, TypeError, ValueError, IndexError):
                raise LayoutError(f"Invalid text position on {owner}: {op!r}") from None
    return ops


def _string_attrs(data: Dict[str, Any]) -> Dict[str, str]:
    return {
        key: value for key, value in data.items()
        if key not in _STRUCTURAL_KEYS and isinstance(value, str)
    }


@dataclass
class LayoutObject:
    """A drawable piece of the layout: the graph itself, a cluster, a node or an edge."""
    name: str
    id: str = ""
    attrs: Dict[str, str] = field(default_factory=dict)
    ops: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def url(self) -> Optional[str]:
        return self.attrs.get("href") or self.attrs.get("URL")

    @property
    def tooltip(self) -> Optional[str]:
        return self.attrs.get("tooltip")

    @property
    def target(self) -> Optional[str]:
        return self.attrs.get("target")

    @property
    def has_anchor(self) -> bool:
        return bool(self.url or self.tooltip or self.target)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutObject":
        name = str(data.get("name", ""))
        ops: List[Dict[str, Any]] = []
        for key in DRAW_KEYS:
            if key in data:
                ops.extend(_check_ops(data[key], name or "graph"))
        attrs = _string_attrs(data)
        return cls(name=name, id=attrs.get("id", ""), attrs=attrs, ops=ops)


@dataclass
class LayoutCluster(LayoutObject):
    clusters: List["LayoutCluster"] = field(default_factory=list)


@dataclass
class LayoutEdge(LayoutObject):
    tail: str = ""
    head: str = ""


@dataclass
class LayoutGraph(LayoutObject):
    """
    A laid out graph, ready to be rendered.

    Coordinates are in points with Y growing upwards, as Graphviz writes them.
    """
    directed: bool = True
    bb: Box = Box(Point(0.0, 0.0), Point(0.0, 0.0))
    clusters: List[LayoutCluster] = field(default_factory=list)
    nodes: List[LayoutObject] = field(default_factory=list)
    edges: List[LayoutEdge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutGraph":
        if "bb" not in data:
            raise LayoutError("Layout has no bounding box; was it produced by Graphviz -Tjson?")
        base = LayoutObject.from_dict(data)
        graph = cls(
            name=base.name,
            id=base.id or "graph0",
            attrs=base.attrs,
            ops=base.ops,
            directed=bool(data.get("directed", True)),
            bb=_parse_bb(data["bb"]),
        )

        objects = data.get("objects", [])
        by_gvid = {obj.get("_gvid", i): obj for i, obj in enumerate(objects)}
        subgraph_count = data.get("_subgraph_cnt", 0)

        def clusters_of(gvids: Sequence[int]) -> List[LayoutCluster]:
            # Plain subgraphs are not drawn but may contain clusters
            found = []
            for gvid in gvids:
                sub = by_gvid.get(gvid)
                if sub is None:
                    raise LayoutError(f"Unknown subgraph reference: {gvid}")
                children = clusters_of(sub.get("subgraphs", []))
                if str(sub.get("name", "")).startswith("cluster"):
                    base = LayoutObject.from_dict(sub)
                    found.append(LayoutCluster(
                        name=base.name, id=base.id, attrs=base.attrs, ops=base.ops, clusters=children,
                    ))
                else:
                    found.extend(children)
            return found

        graph.clusters = clusters_of(data.get("subgraphs", []))

        for i, obj in enumerate(objects):
            if obj.get("_gvid", i) < subgraph_count or "nodes" in obj:
                continue
            graph.nodes.append(LayoutObject.from_dict(obj))

        for data_edge in data.get("edges", []):
            try:
                tail = by_gvid[data_edge["tail"]]["name"]
                head = by_gvid[data_edge["head"]]["name"]
            except KeyError:
                raise LayoutError(f"Edge refers to an unknown node: {data_edge!r}") from None
            base = LayoutObject.from_dict(data_edge)
            graph.edges.append(LayoutEdge(
                name=f"{tail}:{head}", id=base.id, attrs=base.attrs, ops=base.ops, tail=tail, head=head,
            ))

        graph._assign_ids()
        logger.debug(
            "Read layout %r: %d clusters, %d nodes, %d edges",
            graph.name, len(graph.clusters), len(graph.nodes), len(graph.edges),
        )
        return graph

    def iter_clusters(self) -> Iterator[LayoutCluster]:
        """All clusters, parents before their children."""
        stack = list(reversed(self.clusters))
        while stack:
            cluster = stack.pop()
            yield cluster
            stack.extend(reversed(cluster.clusters))

    def _assign_ids(self) -> None:
        # Objects without an explicit id are numbered the way Graphviz does
        for prefix, objects in (("clust", self.iter_clusters()), ("node", self.nodes), ("edge", self.edges)):
            for i, obj in enumerate(objects, start=1):
                if not obj.id:
                    obj.id = f"{prefix}{i}"

    @classmethod
    def from_json(cls, json_str: str) -> "LayoutGraph":
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise LayoutError(f"Layout is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise LayoutError("Layout JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def from_dot(cls, dot_source: str, engine: str = "dot") -> "LayoutGraph":
        """Lay out DOT source with Graphviz and read the result."""
        return cls.from_json(layout_json(dot_source, engine=engine))


def layout_json(dot_source: str, engine: str = "dot") -> str:
    """
    Run a Graphviz layout engine on DOT source and return its JSON output.

    Raises:
        RuntimeError: If the Graphviz executable is not available
        LayoutError: If Graphviz rejects the input
    """
    source = graphviz.Source(dot_source, engine=engine)
    try:
        return source.pipe(format="json").decode("utf-8")
    except graphviz.ExecutableNotFound as e:
        raise RuntimeError(
            "Graphviz executable not found. "
            "Please install Graphviz: https://graphviz.org/download/"
        ) from e
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode("utf-8", "replace") if isinstance(e.stderr, bytes) else e.stderr
        raise LayoutError(f"Graphviz failed to lay out the graph: {stderr or e}") from e
