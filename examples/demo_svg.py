"""Demo rendering a DOT graph to SVG.

Graphviz lays out the graph and gvsvg writes the drawing as SVG, which
requires Graphviz to be installed on the system.
"""

from pathlib import Path

from gvsvg import LayoutGraph, RenderOptions, render_svg


DOT = """
digraph health_check {
    fontnames="svg";
    node [fontname="Helvetica"];
    subgraph cluster_retry {
        label="Retry";
        URL="https://example.com/runbook?step=restart&verbose=1";
        restart; verify;
    }
    check [label="Check Server Status", tooltip="GET /health"];
    healthy [label="Healthy?", shape=diamond];
    ok [label="Log: Server OK", style=dashed];
    alert [label="Send Alert", color=red, fontcolor=red];
    check -> healthy;
    healthy -> ok [label="yes"];
    healthy -> restart [label="no", penwidth=2];
    restart -> verify -> alert;
}
"""


try:
    layout = LayoutGraph.from_dot(DOT)
    svg_output = render_svg(layout, RenderOptions(user=""))

    output = Path("build/health_check.svg")
    output.parent.mkdir(exist_ok=True)
    output.write_text(svg_output, encoding="utf-8")

    print(f"✓ SVG written to: {output}")
    print(f"  {len(layout.nodes)} nodes, {len(layout.edges)} edges, {len(svg_output)} bytes")

except RuntimeError as e:
    print(f"✗ Error: {e}")
    print("\nTo lay out DOT files, install Graphviz:")
    print("  macOS:   brew install graphviz")
    print("  Ubuntu:  sudo apt-get install graphviz")
    print("  Windows: Download from https://graphviz.org/download/")
