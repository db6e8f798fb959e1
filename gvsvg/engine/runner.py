"""RenderRunner: walks a laid out graph and drives a renderer through its callbacks."""

import getpass
import io
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gvsvg import __version__
from gvsvg.backend.base import RenderEngine
from gvsvg.backend.features import RENDER_FEATURES_SVG, RenderFeatures
from gvsvg.backend.svg import SvgRenderer
from gvsvg.core.colors import parse_color
from gvsvg.core.fonts import lookup_postscript_alias
from gvsvg.core.sink import OutputSink
from gvsvg.core.types import (
    PENWIDTH_NORMAL,
    Box,
    FontNames,
    GraphInfo,
    Job,
    ObjState,
    ObjType,
    PenType,
    Point,
    StringColor,
    TextPara,
)
from gvsvg.engine.layout import LayoutCluster, LayoutEdge, LayoutGraph, LayoutObject


logger = logging.getLogger(__name__)


DEFAULT_LAYERSEP = ":\t "

POINTS_PER_INCH = 72.0

_SETLINEWIDTH = re.compile(r'^setlinewidth\(\s*([0-9.eE+-]+)\s*\)$')

# xdot writes l/c/r in JSON output and -1/0/1 in plain xdot
_JUSTIFICATION = {"l": "l", "r": "r", "c": "n", -1: "l", 0: "n", 1: "r"}


def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def _is_true(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("true", "yes", "1")


@dataclass
class RenderOptions:
    """Per-run settings for producing a document."""
    generator: str = "gvsvg"
    version: str = __version__
    build: str = ""
    user: str = field(default_factory=_default_user)
    scale: float = 1.0
    fontnames: Optional[FontNames] = None


class RenderRunner:
    """
    Issues the callbacks for one document, in the order a renderer expects:

        begin_job, begin_graph, begin_page,
            [begin_layer] clusters, nodes, edges [end_layer]
        end_page, end_graph

    Objects with a URL, tooltip or target have their drawing wrapped in an
    anchor.
    """

    def __init__(
        self,
        renderer: Optional[RenderEngine] = None,
        options: Optional[RenderOptions] = None,
        features: RenderFeatures = RENDER_FEATURES_SVG,
    ):
        self.renderer = renderer or SvgRenderer()
        self.options = options or RenderOptions()
        self.features = features

    def make_job(self, layout: LayoutGraph, sink: OutputSink) -> Job:
        """Work out page geometry and document metadata for a layout."""
        opts = self.options
        pad = self.features.default_pad
        if layout.attrs.get("pad"):
            # pad is given in inches
            try:
                pad = float(layout.attrs["pad"].split(",")[0]) * POINTS_PER_INCH
            except ValueError:
                logger.warning("Ignoring invalid pad %r", layout.attrs["pad"])

        fontnames = opts.fontnames or FontNames.from_attr(layout.attrs.get("fontnames"))
        graph = GraphInfo(
            name=layout.name,
            directed=layout.directed,
            attrs=dict(layout.attrs),
            fontnames=fontnames,
        )

        landscape = layout.attrs.get("rotate") == "90" or _is_true(layout.attrs.get("landscape"))
        rotation = 90 if landscape else 0
        bb = layout.bb
        width = bb.ur.x - bb.ll.x + 2 * pad
        height = bb.ur.y - bb.ll.y + 2 * pad
        if rotation:
            width, height = height, width
            translation = Point(-(bb.ur.x + pad), -(bb.ur.y + pad))
        else:
            translation = Point(pad - bb.ll.x, -(bb.ur.y + pad))

        scale = opts.scale * self._size_zoom(layout, rotation) * self._dpi(layout) / POINTS_PER_INCH
        canvas_w = width * scale
        canvas_h = height * scale
        return Job(
            sink=sink,
            graph=graph,
            info=(opts.generator, opts.version, opts.build),
            user=opts.user,
            pages_array=(1, 1),
            canvas_box=Box(Point(0.0, 0.0), Point(canvas_w, canvas_h)),
            width=int(round(canvas_w)),
            height=int(round(canvas_h)),
            scale=Point(scale, scale),
            rotation=rotation,
            translation=translation,
        )

    @staticmethod
    def _size_zoom(layout: LayoutGraph, rotation: int) -> float:
        """
        Zoom that fits the drawing into the graph ``size`` attribute.

        ``size="w,h"`` (inches) only shrinks a drawing that is too large;
        ``size="w,h!"`` also grows one that is smaller in both directions.
        """
        value = (layout.attrs.get("size") or "").strip()
        if not value:
            return 1.0
        fill = value.endswith("!")
        try:
            parts = [float(v) * POINTS_PER_INCH for v in value.rstrip("!").split(",")]
        except ValueError:
            logger.warning("Ignoring invalid size %r", value)
            return 1.0
        size_w, size_h = parts[0], parts[-1]
        if size_w <= 0 or size_h <= 0:
            logger.warning("Ignoring invalid size %r", value)
            return 1.0
        if rotation:
            size_w, size_h = size_h, size_w

        bb = layout.bb
        draw_w, draw_h = bb.ur.x - bb.ll.x, bb.ur.y - bb.ll.y
        if draw_w <= 0 or draw_h <= 0:
            return 1.0
        if size_w < draw_w or size_h < draw_h or (fill and size_w > draw_w and size_h > draw_h):
            return min(size_w / draw_w, size_h / draw_h)
        return 1.0

    @staticmethod
    def _dpi(layout: LayoutGraph) -> float:
        value = layout.attrs.get("dpi") or layout.attrs.get("resolution")
        if not value:
            return POINTS_PER_INCH
        try:
            dpi = float(value)
        except ValueError:
            dpi = 0.0
        if dpi <= 0:
            logger.warning("Ignoring invalid dpi %r", value)
            return POINTS_PER_INCH
        return dpi

    def render(self, layout: LayoutGraph, sink: OutputSink) -> Job:
        """Write the whole document for *layout* into *sink*."""
        job = self.make_job(layout, sink)
        r = self.renderer
        logger.debug("Rendering %r with %s", layout.name, type(r).__name__)

        r.begin_job(job)
        job.obj = self._obj_state(ObjType.GRAPH, layout)
        r.begin_graph(job)
        r.begin_page(job)
        self._draw_anchored(job, layout)

        layers = self._layers(layout)
        for num, layer in enumerate(layers or [None], start=1):
            if layer is not None:
                r.begin_layer(job, layer, num, len(layers))
            for cluster in layout.clusters:
                self._render_cluster(job, layout, cluster, layer)
            for node in layout.nodes:
                if self._in_layer(layout, node, layer):
                    self._render_object(job, ObjType.NODE, node)
            for edge in layout.edges:
                if self._in_layer(layout, edge, layer):
                    self._render_object(job, ObjType.EDGE, edge)
            if layer is not None:
                r.end_layer(job)

        job.obj = self._obj_state(ObjType.GRAPH, layout)
        r.end_page(job)
        r.end_graph(job)
        job.obj = None
        return job

    def _render_cluster(self, job: Job, layout: LayoutGraph, cluster: LayoutCluster, layer: Optional[str]) -> None:
        r = self.renderer
        drawn = self._in_layer(layout, cluster, layer)
        if drawn:
            job.obj = self._obj_state(ObjType.CLUSTER, cluster)
            r.begin_cluster(job)
            self._draw_anchored(job, cluster)
        for child in cluster.clusters:
            self._render_cluster(job, layout, child, layer)
        if drawn:
            job.obj = self._obj_state(ObjType.CLUSTER, cluster)
            r.end_cluster(job)

    def _render_object(self, job: Job, kind: ObjType, obj: LayoutObject) -> None:
        job.obj = self._obj_state(kind, obj)
        getattr(self.renderer, f"begin_{kind.value}")(job)
        self._draw_anchored(job, obj)
        getattr(self.renderer, f"end_{kind.value}")(job)

    @staticmethod
    def _obj_state(kind: ObjType, obj: LayoutObject) -> ObjState:
        state = ObjState(kind, id=obj.id, name=obj.name, url=obj.url, tooltip=obj.tooltip, target=obj.target)
        if isinstance(obj, LayoutEdge):
            state.tail, state.head = obj.tail, obj.head
        return state

    def _draw_anchored(self, job: Job, obj: LayoutObject) -> None:
        if obj.has_anchor:
            self.renderer.begin_anchor(job, obj.url, obj.tooltip, obj.target, obj.id)
        self._draw_ops(job, obj.ops)
        if obj.has_anchor:
            self.renderer.end_anchor(job)

    def _draw_ops(self, job: Job, ops: List[Dict[str, Any]]) -> None:
        """Replay xdot drawing operations as renderer callbacks."""
        r = self.renderer
        obj = job.obj
        obj.pencolor = StringColor("black")
        obj.fillcolor = StringColor("lightgrey")
        obj.pen = PenType.SOLID
        obj.penwidth = PENWIDTH_NORMAL
        fontsize, fontname = 14.0, "Times-Roman"

        for op in ops:
            code = op["op"]
            if code in ("c", "C"):
                if op.get("grad", "none") != "none":
                    logger.debug("Gradient colors are not supported, keeping the current color")
                    continue
                color = parse_color(op["color"])
                if code == "c":
                    obj.pencolor = color
                else:
                    obj.fillcolor = color
            elif code == "S":
                self._apply_style(obj, op.get("style", ""))
            elif code == "F":
                fontsize = float(op.get("size", fontsize))
                fontname = op.get("face", fontname)
            elif code == "T":
                para = TextPara(
                    text=op.get("text", ""),
                    fontsize=fontsize,
                    fontname=fontname,
                    just=_JUSTIFICATION.get(op.get("align"), "n"),
                    postscript_alias=lookup_postscript_alias(fontname),
                )
                r.textpara(job, op["pt"], para)
            elif code in ("e", "E"):
                x, y, w, h = op["rect"]
                r.ellipse(job, [Point(x, y), Point(x + w, y + h)], code == "E")
            elif code in ("p", "P"):
                r.polygon(job, op["points"], code == "P")
            elif code in ("b", "B"):
                r.bezier(job, op["points"], False, False, code == "B")
            elif code == "L":
                r.polyline(job, op["points"])
            else:
                logger.debug("Skipping unsupported draw operation %r", code)

    @staticmethod
    def _apply_style(obj: ObjState, style: str) -> None:
        match = _SETLINEWIDTH.match(style)
        if match:
            obj.penwidth = float(match.group(1))
        elif style == "bold":
            obj.penwidth = 2.0
        elif style in ("solid", "dashed", "dotted"):
            obj.pen = PenType(style)
        else:
            logger.debug("Ignoring style %r", style)

    @staticmethod
    def _split_layers(layout: LayoutGraph, value: str) -> List[str]:
        sep = layout.attrs.get("layersep") or DEFAULT_LAYERSEP
        return [name for name in re.split("[" + re.escape(sep) + "]", value) if name]

    def _layers(self, layout: LayoutGraph) -> List[str]:
        return self._split_layers(layout, layout.attrs.get("layers", ""))

    def _in_layer(self, layout: LayoutGraph, obj: LayoutObject, layer: Optional[str]) -> bool:
        if layer is None:
            return True
        selected = obj.attrs.get("layer")
        if not selected or selected == "all":
            return True
        return layer in self._split_layers(layout, selected)


def render_svg(layout: LayoutGraph, options: Optional[RenderOptions] = None) -> str:
    """Render a layout to an SVG document string."""
    buffer = io.BytesIO()
    RenderRunner(SvgRenderer(), options).render(layout, OutputSink(buffer))
    return buffer.getvalue().decode("utf-8")
