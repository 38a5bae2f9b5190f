"""Element printers and the process-wide default printer.

A printer is anything that turns one matrix element into text: a plain
callable, or an object with a ``render`` method that may keep state
between calls. ``to_string`` picks, in order, the printer passed to it,
the registered default, and finally ``str``.
"""

import threading
from typing import Any, Callable, Optional, Union


class ElementPrinter:
    """Base class of stateful printers."""

    def render(self, element: Any) -> str:
        return str(element)

    def __call__(self, element: Any) -> str:
        return self.render(element)


class IndexedPrinter(ElementPrinter):
    """Prefix every element with a running index.

    The counter survives across ``to_string`` calls until ``reset`` is
    called, so two consecutive prints of a 2x2 matrix number the elements
    ``1..4`` and then ``5..8``.
    """

    def __init__(self, start: int = 1, fmt: str = "{index}:{element}"):
        self.start = start
        self.index = start
        self.fmt = fmt

    def render(self, element: Any) -> str:
        text = self.fmt.format(index=self.index, element=element)
        self.index += 1
        return text

    def reset(self) -> None:
        self.index = self.start


Printer = Union[ElementPrinter, Callable[[Any], str]]

_lock = threading.Lock()
_default_printer: Optional[Printer] = None


def _as_render(printer: Printer) -> Callable[[Any], str]:
    render = getattr(printer, "render", None)
    if callable(render):
        return render
    if callable(printer):
        return printer
    raise TypeError(
        f"Printer must be callable or define render(), got {type(printer).__name__}"
    )


def register_printer(printer: Optional[Printer]) -> None:
    """Install ``printer`` as the default for ``to_string``.

    The last call wins. Passing ``None`` clears the slot.
    """
    global _default_printer
    if printer is not None:
        _as_render(printer)
    with _lock:
        _default_printer = printer


def registered_printer() -> Optional[Printer]:
    with _lock:
        return _default_printer


def to_string(matrix, printer: Optional[Printer] = None) -> str:
    """Render ``matrix`` one row per line, as ``[e1, e2, ...]``.

    Elements are visited in row-major order, which is the order a stateful
    printer sees them in.
    """
    if printer is None:
        printer = registered_printer()
    render = str if printer is None else _as_render(printer)

    if matrix.is_empty():
        return "[]"
    lines = []
    for r in range(1, matrix.rows + 1):
        cells = [render(matrix.value(r, c)) for c in range(1, matrix.cols + 1)]
        lines.append("[" + ", ".join(cells) + "]")
    return "\n".join(lines)
