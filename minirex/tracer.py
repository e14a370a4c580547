import json
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from graphviz import Digraph

# tracing for the matcher.
# every evaluation of a (pattern, offset) pair is a frame; the two branches
# of an alternation become child frames of the frame that met the group.
# the resulting tree can be dumped to json or drawn with graphviz.


@dataclass
class TraceFrame:
    pattern: str
    offset: int
    steps: List[Tuple[str, int]] = field(default_factory=list)
    children: List["TraceFrame"] = field(default_factory=list)
    result: Optional[bool] = None


class MatchTracer:
    """
    Records what the matcher does. Pass an instance as the `tracer` argument
    of `minirex.matcher.matches`; `root` holds the top frame afterwards.
    """

    def __init__(self):
        self.root = None
        self._stack = []

    def enter(self, pattern, offset):
        frame = TraceFrame(pattern, offset)
        if self._stack:
            self._stack[-1].children.append(frame)
        else:
            self.root = frame
        self._stack.append(frame)

    def step(self, token, offset):
        self._stack[-1].steps.append((token, offset))

    def exit(self, result):
        self._stack.pop().result = result

    @property
    def result(self):
        return None if self.root is None else self.root.result

    def frames(self):
        """
        Walk every recorded frame, parents before children.
        """
        pending = [self.root] if self.root is not None else []
        while pending:
            frame = pending.pop()
            yield frame
            pending.extend(reversed(frame.children))


def trace_to_dict(frame: TraceFrame) -> dict:
    """
    Convert a frame tree into a JSON-serializable dictionary.
    """
    return {
        "id": str(id(frame)),
        "pattern": frame.pattern,
        "offset": frame.offset,
        "steps": [{"token": token, "offset": offset} for token, offset in frame.steps],
        "result": frame.result,
        "children": [trace_to_dict(child) for child in frame.children],
    }


def persist_trace(tracer: MatchTracer, filename: str) -> None:
    """
    Serialize the trace to a JSON file.
    """
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(trace_to_dict(tracer.root), f, indent=2)


def _label(frame):
    pattern = frame.pattern or "(empty)"
    lines = [f"{pattern} @ {frame.offset}"]
    lines.extend(f"{token} @ {offset}" for token, offset in frame.steps)
    lines.append(f"result: {frame.result}")
    # graphviz reads \l as a left-justified line break
    return "\\l".join(lines) + "\\l"


def build_graph(tracer: MatchTracer, format: str = "png") -> Digraph:
    """
    Create a Graphviz graph of the trace, one box per frame.
    Frames that matched are drawn green, the rest grey.
    """
    graph = Digraph(comment="Match trace", format=format)
    graph.attr("node", shape="box", fontname="Courier")

    def recurse(frame):
        fid = str(id(frame))
        color = "palegreen" if frame.result else "lightgrey"
        graph.node(fid, _label(frame), style="filled", fillcolor=color)
        for child in frame.children:
            graph.edge(fid, str(id(child)))
            recurse(child)

    if tracer.root is not None:
        recurse(tracer.root)
    return graph


def visualize_trace(tracer: MatchTracer, output_path: str = "trace", format: str = "png") -> str:
    """
    Render the trace with Graphviz.
    Returns the path to the rendered file.
    """
    return build_graph(tracer, format=format).render(output_path, cleanup=True)
