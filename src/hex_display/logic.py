# hex_display/logic.py

from __future__ import annotations

from collections import abc
from typing import Iterable, Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]

_LOWER_DIGITS = tuple(f"{b:02x}" for b in range(256))
_UPPER_DIGITS = tuple(f"{b:02X}" for b in range(256))


class TextSink(Protocol):
    def write(self, s: str) -> object: ...


def _borrow(data: BytesLike) -> memoryview:
    """Return a flat, read-only byte view of ``data``.

    Contiguous buffer-protocol objects are referenced, not copied.
    Non-contiguous buffers and plain iterables of ints are copied once
    into fresh bytes.
    """
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        # bytes(n) would mean n zero bytes, not a byte sequence.
        if isinstance(data, int) or not isinstance(data, abc.Iterable):
            raise TypeError(
                "expected a bytes-like object or iterable of ints, "
                f"not {type(data).__name__}"
            ) from None
        view = memoryview(bytes(data))
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()

def _strip_fill_align(spec: str) -> str:
    if len(spec) >= 2 and spec[1] in "<>=^":
        return spec[2:]
    if spec[:1] in ("<", ">", "=", "^"):
        return spec[1:]
    return spec


# ---------------- Hex view ----------------
class Hex:
    """Hexadecimal view over a byte sequence.

    The view never mutates the bytes; it renders them on demand,
    two digits per byte, with no separators::

        >>> data = bytes([0xAB, 0x01])
        >>> str(Hex(data))
        'ab01'
        >>> f"{Hex(data):X}"
        'AB01'

    ``upper`` selects the case used by ``str()`` and plain ``format()``.
    A trailing ``x``/``X`` in a format spec overrides it, like ``int``.
    """

    __slots__ = ("_data", "_upper")

    def __init__(self, data: BytesLike, upper: bool = False) -> None:
        self._data = _borrow(data)
        self._upper = bool(upper)

    @property
    def data(self) -> memoryview:
        return self._data

    @property
    def is_upper(self) -> bool:
        return self._upper

    # -- case conversion
    def upper(self) -> Hex:
        """Same bytes, rendered with ``A-F``."""
        if self._upper:
            return self
        return Hex(self._data, upper=True)

    def lower(self) -> Hex:
        """Same bytes, rendered with ``a-f``."""
        if not self._upper:
            return self
        return Hex(self._data, upper=False)

    # -- rendering
    def write_to(self, sink: TextSink) -> None:
        """Write the hex digits to ``sink`` byte by byte, first byte first.

        Errors raised by ``sink.write`` propagate unchanged and stop the
        render; whatever was already written stays in the sink.
        """
        digits = _UPPER_DIGITS if self._upper else _LOWER_DIGITS
        for b in self._data:
            sink.write(digits[b])

    def to_string(self) -> str:
        text = self._data.hex()
        return text.upper() if self._upper else text

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        view = self
        if format_spec.endswith("x"):
            view, format_spec = self.lower(), format_spec[:-1]
        elif format_spec.endswith("X"):
            view, format_spec = self.upper(), format_spec[:-1]
        # A precision would cut the text mid-byte.
        if "." in _strip_fill_align(format_spec):
            raise ValueError("Precision not allowed in Hex format specifier")
        # Remaining fill/align/width is handled like any str.
        return format(view.to_string(), format_spec)

    def __repr__(self) -> str:
        suffix = ", upper=True" if self._upper else ""
        return f"{type(self).__name__}({self._data.tobytes()!r}{suffix})"

    # -- value semantics
    def __bytes__(self) -> bytes:
        return self._data.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hex):
            return NotImplemented
        return self._upper == other._upper and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._data.tobytes(), self._upper))


# ---------------- Byte container helpers ----------------
def hex_view(data: BytesLike) -> Hex:
    return Hex(data)

def upper_hex_view(data: BytesLike) -> Hex:
    return Hex(data, upper=True)

def to_hex_string(data: BytesLike) -> str:
    """Lower-case hex of ``data`` as a new ``str`` (e.g. ``b"\\xab"`` → ``"ab"``)."""
    return Hex(data).to_string()

def to_upper_hex_string(data: BytesLike) -> str:
    """Upper-case hex of ``data`` as a new ``str`` (e.g. ``b"\\xab"`` → ``"AB"``)."""
    return Hex(data, upper=True).to_string()


class HexBytes(bytes):
    """``bytes`` that can hand out hex views of itself."""

    def hex_view(self) -> Hex:
        return Hex(self)

    def upper_hex_view(self) -> Hex:
        return Hex(self, upper=True)

    def to_hex_string(self) -> str:
        return Hex(self).to_string()

    def to_upper_hex_string(self) -> str:
        return Hex(self, upper=True).to_string()
