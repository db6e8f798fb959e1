"""SVG 1.1 renderer.

Translates the drawing callbacks of a layout driver into an SVG document.
Layout coordinates have Y growing upwards; every coordinate is written with
its Y negated and the page group carries the transform that puts the drawing
back on the canvas.

Example:
    >>> import io
    >>> from gvsvg.core import Job, ObjState, ObjType, OutputSink, Point
    >>> out = io.BytesIO()
    >>> job = Job(sink=OutputSink(out))
    >>> job.obj = ObjState(ObjType.NODE, id="node1", name="a")
    >>> renderer = SvgRenderer()
    >>> renderer.polyline(job, [Point(0, 0), Point(10, 10)])
"""

from typing import Optional, Sequence

from gvsvg.backend.base import RenderEngine
from gvsvg.core.colors import format_color
from gvsvg.core.escape import xml_comment_string, xml_string, xml_url_string
from gvsvg.core.types import (
    PENWIDTH_NORMAL,
    FontNames,
    Job,
    ObjType,
    PenType,
    Point,
    StringColor,
    TextPara,
    edge_name,
)


__all__ = ["SvgRenderer", "DASH_ARRAY", "DOT_ARRAY"]


DASH_ARRAY = "5,2"
DOT_ARRAY = "1,5"

_TEXT_ANCHORS = {
    'l': "start",
    'r': "end",
}


def _g(value: float) -> str:
    """Shortest %g form, never negative zero."""
    return "%g" % (value + 0.0)


def _f2(value: float) -> str:
    text = "%.2f" % value
    return "0.00" if text == "-0.00" else text


def _pt(p: Point) -> str:
    return f"{_g(p.x)},{_g(-p.y)}"


class SvgRenderer(RenderEngine):
    """Writes SVG elements for each drawing callback. Holds no state."""

    @staticmethod
    def _grstyle(job: Job, filled: bool) -> None:
        """Write fill, stroke, stroke-width and stroke-dasharray for the current object."""
        obj = job.obj
        out = job.sink
        fill = format_color(obj.fillcolor) if filled else "none"
        out.write(f' fill="{fill}" stroke="{format_color(obj.pencolor)}"')
        if obj.penwidth != PENWIDTH_NORMAL:
            out.write(f' stroke-width="{_g(obj.penwidth)}"')
        if obj.pen == PenType.DASHED:
            out.write(f' stroke-dasharray="{DASH_ARRAY}"')
        elif obj.pen == PenType.DOTTED:
            out.write(f' stroke-dasharray="{DOT_ARRAY}"')

    def _begin_group(self, job: Job, kind: str, title: str) -> None:
        job.sink.write(
            f'<g id="{xml_string(job.obj.id)}" class="{kind}">'
            f'<title>{xml_string(title)}</title>\n'
        )

    @staticmethod
    def _end_group(job: Job) -> None:
        job.sink.write("</g>\n")

    # Document lifecycle

    def begin_job(self, job: Job) -> None:
        out = job.sink
        out.write('<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n')
        stylesheet = job.graph.get("stylesheet")
        if stylesheet:
            out.write(f'<?xml-stylesheet href="{xml_url_string(stylesheet)}" type="text/css"?>\n')
        out.write('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"\n')
        out.write(' "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n')

        generator, version, build = job.info
        out.write(
            f"<!-- Generated by {xml_comment_string(generator)} version {xml_comment_string(version)}"
            f" ({xml_comment_string(build)})"
        )
        # The user name may be in any encoding, only trust plain ASCII
        if job.user.isascii():
            out.write(f"\n     For user: {xml_comment_string(job.user)}")
        else:
            out.write("\n")
        out.write(" -->\n")

    def begin_graph(self, job: Job) -> None:
        out = job.sink
        out.write("<!--")
        if job.graph.name:
            out.write(f" Title: {xml_comment_string(job.graph.name)}")
        columns, rows = job.pages_array
        out.write(f" Pages: {columns * rows} -->\n")

        box = job.canvas_box
        out.write(
            f'<svg width="{job.width}pt" height="{job.height}pt"'
            f' viewBox="{_f2(box.ll.x)} {_f2(box.ll.y)} {_f2(box.ur.x)} {_f2(box.ur.y)}"'
            ' xmlns="http://www.w3.org/2000/svg"'
            ' xmlns:xlink="http://www.w3.org/1999/xlink">\n'
        )

    def end_graph(self, job: Job) -> None:
        job.sink.write("</svg>\n")

    def begin_layer(self, job: Job, layername: str, layer_num: int, num_layers: int) -> None:
        job.sink.write(f'<g id="{xml_string(layername)}" class="layer">\n')

    def end_layer(self, job: Job) -> None:
        self._end_group(job)

    def begin_page(self, job: Job) -> None:
        # A page of the graph, or the whole graph when not paging
        out = job.sink
        out.write(
            f'<g id="{xml_string(job.obj.id)}" class="graph"'
            f' transform="scale({_g(job.scale.x)} {_g(job.scale.y)})'
            f' rotate({-job.rotation})'
            f' translate({_g(job.translation.x)} {_g(-job.translation.y)})">\n'
        )
        if job.graph.name:
            out.write(f"<title>{xml_string(job.graph.name)}</title>\n")

    def end_page(self, job: Job) -> None:
        self._end_group(job)

    def begin_cluster(self, job: Job) -> None:
        self._begin_group(job, ObjType.CLUSTER.value, job.obj.name)

    def end_cluster(self, job: Job) -> None:
        self._end_group(job)

    def begin_node(self, job: Job) -> None:
        self._begin_group(job, ObjType.NODE.value, job.obj.name)

    def end_node(self, job: Job) -> None:
        self._end_group(job)

    def begin_edge(self, job: Job) -> None:
        obj = job.obj
        self._begin_group(job, ObjType.EDGE.value, edge_name(obj.tail, obj.head, job.graph.directed))

    def end_edge(self, job: Job) -> None:
        self._end_group(job)

    def begin_anchor(self, job: Job, href: Optional[str], tooltip: Optional[str],
                     target: Optional[str], id: Optional[str]) -> None:
        out = job.sink
        out.write("<a")
        if href:
            out.write(f' xlink:href="{xml_url_string(href)}"')
        if tooltip:
            out.write(f' xlink:title="{xml_string(tooltip)}"')
        if target:
            out.write(f' target="{xml_string(target)}"')
        out.write(">\n")

    def end_anchor(self, job: Job) -> None:
        job.sink.write("</a>\n")

    def comment(self, job: Job, text: str) -> None:
        job.sink.write(f"<!-- {xml_comment_string(text)} -->\n")

    # Text

    def textpara(self, job: Job, p: Point, para: TextPara) -> None:
        out = job.sink
        anchor = _TEXT_ANCHORS.get(para.just, "middle")
        y = p.y + para.yoffset_centerline
        out.write(f'<text text-anchor="{anchor}" x="{_g(p.x)}" y="{_g(-y)}"')

        alias = para.postscript_alias
        if alias:
            mode = job.graph.fontnames
            if mode == FontNames.PS:
                family, weight, style = alias.name, alias.weight, alias.style
            elif mode == FontNames.SVG:
                family, weight, style = alias.svg_font_family, alias.svg_font_weight, alias.svg_font_style
            else:
                family, weight, style = alias.family, alias.weight, alias.style
            if mode != FontNames.SVG and alias.svg_font_family:
                family = f"{family},{alias.svg_font_family}"
            out.write(f' font-family="{xml_string(family or "")}"')
            if weight:
                out.write(f' font-weight="{xml_string(weight)}"')
            if alias.stretch:
                out.write(f' font-stretch="{xml_string(alias.stretch)}"')
            if style:
                out.write(f' font-style="{xml_string(style)}"')
        else:
            out.write(f' font-family="{xml_string(para.fontname)}"')
        out.write(f' font-size="{_f2(para.fontsize)}"')

        pencolor = job.obj.pencolor
        # Black is the default fill for text
        if not (isinstance(pencolor, StringColor) and pencolor.name.lower() == "black"):
            out.write(f' fill="{format_color(pencolor)}"')
        out.write(f">{xml_string(para.text)}</text>\n")

    # Shapes

    def ellipse(self, job: Job, A: Sequence[Point], filled: bool) -> None:
        center, corner = A[0], A[1]
        out = job.sink
        out.write("<ellipse")
        self._grstyle(job, filled)
        out.write(
            f' cx="{_g(center.x)}" cy="{_g(-center.y)}"'
            f' rx="{_g(abs(corner.x - center.x))}" ry="{_g(abs(corner.y - center.y))}"/>\n'
        )

    def polygon(self, job: Job, A: Sequence[Point], filled: bool) -> None:
        out = job.sink
        out.write("<polygon")
        self._grstyle(job, filled)
        # Repeating the first point works around consumers that do not close polygons
        points = " ".join(_pt(p) for p in A)
        out.write(f' points="{points} {_pt(A[0])}"/>\n')

    def polyline(self, job: Job, A: Sequence[Point]) -> None:
        out = job.sink
        out.write("<polyline")
        self._grstyle(job, False)
        points = "".join(f"{_pt(p)} " for p in A)
        out.write(f' points="{points}"/>\n')

    def bezier(self, job: Job, A: Sequence[Point], arrow_at_start: bool,
               arrow_at_end: bool, filled: bool) -> None:
        # Arrowheads arrive as separate shapes, the hints are not needed here
        out = job.sink
        out.write("<path")
        self._grstyle(job, filled)
        out.write(f' d="M{_pt(A[0])}')
        for i, p in enumerate(A[1:]):
            out.write(f"{'C' if i == 0 else ' '}{_pt(p)}")
        out.write('"/>\n')
