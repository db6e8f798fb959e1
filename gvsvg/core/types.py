"""Data model shared by the renderer and the layout driver."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple, Union


PENWIDTH_NORMAL = 1.0


class RenderError(RuntimeError):
    """Raised on internal inconsistencies the renderer cannot recover from."""


class Point(NamedTuple):
    x: float
    y: float


class Box(NamedTuple):
    ll: Point
    ur: Point


@dataclass(frozen=True)
class StringColor:
    """A color name emitted verbatim."""
    name: str


@dataclass(frozen=True)
class RGBAColor:
    """Four 8-bit channels. Alpha 0 means transparent."""
    r: int
    g: int
    b: int
    a: int = 255


Color = Union[StringColor, RGBAColor]


class PenType(Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class ObjType(Enum):
    GRAPH = "graph"
    CLUSTER = "cluster"
    NODE = "node"
    EDGE = "edge"


class FontNames(Enum):
    """Font naming convention used for text runs."""
    NATIVE = "native"
    PS = "ps"
    SVG = "svg"

    @classmethod
    def from_attr(cls, value: Optional[str]) -> "FontNames":
        if value:
            value = value.lower()
            if value == "ps":
                return cls.PS
            if value == "svg":
                return cls.SVG
        return cls.NATIVE


def edge_name(tail: str, head: str, directed: bool) -> str:
    """Canonical label of an edge, as written in DOT."""
    return f"{tail}{'->' if directed else '--'}{head}"


@dataclass
class ObjState:
    """State of the object currently being drawn."""
    type: ObjType
    id: str = ""
    name: str = ""
    tail: str = ""
    head: str = ""
    pencolor: Color = field(default_factory=lambda: StringColor("black"))
    fillcolor: Color = field(default_factory=lambda: StringColor("lightgrey"))
    penwidth: float = PENWIDTH_NORMAL
    pen: PenType = PenType.SOLID
    url: Optional[str] = None
    tooltip: Optional[str] = None
    target: Optional[str] = None


@dataclass
class TextPara:
    """A single line of resolved text."""
    text: str
    fontsize: float
    fontname: str = "Times-Roman"
    just: str = "n"
    yoffset_centerline: float = 0.0
    postscript_alias: Optional[Any] = None


@dataclass
class GraphInfo:
    name: str = ""
    directed: bool = True
    attrs: Dict[str, str] = field(default_factory=dict)
    fontnames: FontNames = FontNames.NATIVE

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attrs.get(key, default)


@dataclass
class Job:
    """Everything the renderer may read while producing one document."""
    sink: Any
    graph: GraphInfo = field(default_factory=GraphInfo)
    obj: Optional[ObjState] = None
    info: Tuple[str, str, str] = ("gvsvg", "", "")
    user: str = ""
    pages_array: Tuple[int, int] = (1, 1)
    canvas_box: Box = Box(Point(0.0, 0.0), Point(0.0, 0.0))
    width: int = 0
    height: int = 0
    scale: Point = Point(1.0, 1.0)
    rotation: int = 0
    translation: Point = Point(0.0, 0.0)
