"""Callback interface a layout driver uses to talk to a renderer."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from gvsvg.core.types import Job, Point, TextPara


class RenderEngine(ABC):
    """
    Drawing callbacks issued by the layout driver, in nesting order.

    Every callback receives the ``Job`` for the document being written; the
    object being drawn is ``job.obj`` and output goes to ``job.sink``.
    Implementations must not keep references to anything they are given.
    """

    @abstractmethod
    def begin_job(self, job: Job) -> None: ...

    @abstractmethod
    def begin_graph(self, job: Job) -> None: ...

    @abstractmethod
    def end_graph(self, job: Job) -> None: ...

    @abstractmethod
    def begin_layer(self, job: Job, layername: str, layer_num: int, num_layers: int) -> None: ...

    @abstractmethod
    def end_layer(self, job: Job) -> None: ...

    @abstractmethod
    def begin_page(self, job: Job) -> None: ...

    @abstractmethod
    def end_page(self, job: Job) -> None: ...

    @abstractmethod
    def begin_cluster(self, job: Job) -> None: ...

    @abstractmethod
    def end_cluster(self, job: Job) -> None: ...

    @abstractmethod
    def begin_node(self, job: Job) -> None: ...

    @abstractmethod
    def end_node(self, job: Job) -> None: ...

    @abstractmethod
    def begin_edge(self, job: Job) -> None: ...

    @abstractmethod
    def end_edge(self, job: Job) -> None: ...

    @abstractmethod
    def begin_anchor(self, job: Job, href: Optional[str], tooltip: Optional[str],
                     target: Optional[str], id: Optional[str]) -> None: ...

    @abstractmethod
    def end_anchor(self, job: Job) -> None: ...

    @abstractmethod
    def textpara(self, job: Job, p: Point, para: TextPara) -> None: ...

    @abstractmethod
    def ellipse(self, job: Job, A: Sequence[Point], filled: bool) -> None:
        """``A[0]`` is the center, ``A[1]`` a corner of the bounding box."""

    @abstractmethod
    def polygon(self, job: Job, A: Sequence[Point], filled: bool) -> None: ...

    @abstractmethod
    def bezier(self, job: Job, A: Sequence[Point], arrow_at_start: bool,
               arrow_at_end: bool, filled: bool) -> None: ...

    @abstractmethod
    def polyline(self, job: Job, A: Sequence[Point]) -> None: ...

    @abstractmethod
    def comment(self, job: Job, text: str) -> None: ...
