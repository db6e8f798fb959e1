import copy
import io
import shutil

import pytest

from gvsvg.core import GraphInfo, Job, ObjState, ObjType, OutputSink, RGBAColor


GRAPHVIZ_AVAILABLE = shutil.which("dot") is not None


def output_of(job):
    """Everything written so far to a job backed by an in-memory sink."""
    return job.sink.stream.getvalue().decode("utf-8")


# Layout of `digraph G { a -> b }` as written by `dot -Tjson`
SIMPLE_LAYOUT = {
    "name": "G",
    "directed": True,
    "strict": False,
    "_draw_": [
        {"op": "c", "grad": "none", "color": "#fffffe00"},
        {"op": "C", "grad": "none", "color": "#ffffff"},
        {"op": "P", "points": [[0.0, 0.0], [0.0, 116.0], [62.0, 116.0], [62.0, 0.0]]},
    ],
    "bb": "0,0,54,108",
    "xdotversion": "1.7",
    "_subgraph_cnt": 0,
    "objects": [
        {
            "_gvid": 0,
            "name": "a",
            "_draw_": [
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "e", "rect": [27.0, 90.0, 27.0, 18.0]},
            ],
            "_ldraw_": [
                {"op": "F", "size": 14.0, "face": "Times-Roman"},
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "T", "pt": [27.0, 85.8], "align": "c", "width": 7.0, "text": "a"},
            ],
            "height": "0.5",
            "label": "\\N",
            "pos": "27,90",
            "width": "0.75",
        },
        {
            "_gvid": 1,
            "name": "b",
            "_draw_": [
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "e", "rect": [27.0, 18.0, 27.0, 18.0]},
            ],
            "_ldraw_": [
                {"op": "F", "size": 14.0, "face": "Times-Roman"},
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "T", "pt": [27.0, 13.8], "align": "c", "width": 7.0, "text": "b"},
            ],
            "height": "0.5",
            "label": "\\N",
            "pos": "27,18",
            "width": "0.75",
        },
    ],
    "edges": [
        {
            "_gvid": 0,
            "tail": 0,
            "head": 1,
            "_draw_": [
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "b", "points": [[27.0, 71.7], [27.0, 63.98], [27.0, 54.71], [27.0, 46.11]]},
            ],
            "_hdraw_": [
                {"op": "S", "style": "solid"},
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "C", "grad": "none", "color": "#000000"},
                {"op": "P", "points": [[30.5, 46.1], [27.0, 36.1], [23.5, 46.1]]},
            ],
            "pos": "e,27,36.104 27,71.697 27,63.983 27,54.712 27,46.112",
        },
    ],
}


# `digraph G { subgraph cluster_x { label="X"; URL="..."; a } a -> b }`, trimmed
CLUSTER_LAYOUT = {
    "name": "G",
    "directed": True,
    "bb": "0,0,70,140",
    "_subgraph_cnt": 2,
    "subgraphs": [0],
    "objects": [
        {
            "_gvid": 0,
            "name": "group",
            "subgraphs": [1],
            "nodes": [2],
            "edges": [],
        },
        {
            "_gvid": 1,
            "name": "cluster_x",
            "bb": "8,64,62,132",
            "label": "X",
            "URL": "http://example.com/?a&b",
            "_draw_": [
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "p", "points": [[8.0, 64.0], [8.0, 132.0], [62.0, 132.0], [62.0, 64.0]]},
            ],
            "_ldraw_": [
                {"op": "F", "size": 14.0, "face": "Times-Roman"},
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "T", "pt": [35.0, 116.8], "align": "c", "width": 10.0, "text": "X"},
            ],
            "nodes": [2],
            "edges": [],
        },
        {
            "_gvid": 2,
            "name": "a",
            "_draw_": [
                {"op": "c", "grad": "none", "color": "#000000"},
                {"op": "e", "rect": [35.0, 90.0, 27.0, 18.0]},
            ],
        },
        {
            "_gvid": 3,
            "name": "b",
            "tooltip": "node <b>",
            "_draw_": [
                {"op": "S", "style": "dashed"},
                {"op": "c", "grad": "none", "color": "red"},
                {"op": "e", "rect": [35.0, 18.0, 27.0, 18.0]},
            ],
        },
    ],
    "edges": [
        {
            "_gvid": 0,
            "tail": 2,
            "head": 3,
            "_draw_": [
                {"op": "S", "style": "setlinewidth(2)"},
                {"op": "c", "grad": "none", "color": "#0000ff"},
                {"op": "b", "points": [[35.0, 71.7], [35.0, 63.98], [35.0, 54.71], [35.0, 46.11]]},
            ],
        },
    ],
}


@pytest.fixture
def simple_layout_dict():
    return copy.deepcopy(SIMPLE_LAYOUT)


@pytest.fixture
def cluster_layout_dict():
    return copy.deepcopy(CLUSTER_LAYOUT)


@pytest.fixture
def job():
    """A job writing into memory, currently drawing node "a" with a black pen."""
    return Job(
        sink=OutputSink(io.BytesIO()),
        graph=GraphInfo(name="G"),
        obj=ObjState(ObjType.NODE, id="node1", name="a", pencolor=RGBAColor(0, 0, 0)),
        info=("gv", "1", "b"),
        user="alice",
    )
