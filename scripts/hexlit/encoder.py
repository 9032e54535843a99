"""
encoder.py — Render a byte buffer as grouped hexadecimal literals.

A buffer is split into elements (single bytes, or 32-bit little-endian
words), each element is printed as an uppercase ``0x`` literal, and the
literals are joined with ", " and wrapped every ``group_size`` elements:

    >>> encode(bytes(range(9)), EncodingConfig.for_width(ElementWidth.BYTE))
    '0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,\\n0x08'

The last literal never has a trailing comma, so the text can be dropped
straight between the braces of a C array initializer.
"""

import enum
import re
from dataclasses import dataclass

import numpy as np

from ._common import C_IDENTIFIER, InvalidGroupSize, NotMultipleOfWordSize

# numpy dtype used to reinterpret the buffer for each element width
ELEMENT_DTYPES = {
    1: np.dtype(np.uint8),
    4: np.dtype("<u4"),
}

C_ELEMENT_TYPES = {
    1: "unsigned char",
    4: "unsigned int",
}

HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


class ElementWidth(enum.IntEnum):
    BYTE = 1
    WORD = 4


class OutputStyle(enum.Enum):
    RAW = "raw"
    HEX_LIST = "hex-list"


# Elements per line used by both command-line tools
DEFAULT_GROUP_SIZES = {
    ElementWidth.BYTE: 8,
    ElementWidth.WORD: 4,
}


@dataclass(frozen=True)
class EncodingConfig:
    element_width: ElementWidth = ElementWidth.BYTE
    group_size: int = 8

    def __post_init__(self):
        if isinstance(self.group_size, bool) or not isinstance(self.group_size, int):
            raise InvalidGroupSize(self.group_size)
        if self.group_size < 1:
            raise InvalidGroupSize(self.group_size)
        object.__setattr__(self, "element_width", ElementWidth(self.element_width))

    @classmethod
    def for_width(cls, element_width, group_size=None):
        """Config for `element_width`, using the conventional group size if none given."""
        element_width = ElementWidth(element_width)
        if group_size is None:
            group_size = DEFAULT_GROUP_SIZES[element_width]
        return cls(element_width, group_size)


def validate(buffer, config):
    """Reject buffers that cannot be split into whole elements."""
    length = memoryview(buffer).nbytes
    if config.element_width is ElementWidth.WORD and length % 4 != 0:
        raise NotMultipleOfWordSize(length)


def elements(buffer, element_width):
    """Return the buffer's elements as a read-only numpy array."""
    return np.frombuffer(bytes(buffer), dtype=ELEMENT_DTYPES[int(element_width)])


def encode(buffer, config, style=OutputStyle.HEX_LIST):
    """Encode `buffer` as a hex list (str), or pass it through as bytes for RAW."""
    data = bytes(buffer)
    if OutputStyle(style) is OutputStyle.RAW:
        return data

    validate(data, config)
    if not data:
        return ""

    digits = 2 * int(config.element_width)
    tokens = [f"0x{int(value):0{digits}X}" for value in elements(data, config.element_width)]

    group = config.group_size
    lines = [", ".join(tokens[i : i + group]) for i in range(0, len(tokens), group)]
    return ",\n".join(lines)


def parse_hex_list(text, element_width=ElementWidth.BYTE):
    """Parse hex-list text back into the bytes it was rendered from."""
    element_width = ElementWidth(element_width)
    limit = 1 << (8 * int(element_width))

    values = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        if token[:2].lower() == "0x":
            token = token[2:]
        if not HEX_DIGITS.fullmatch(token):
            raise ValueError(f"invalid hex literal: {token!r}")
        value = int(token, 16)
        if not 0 <= value < limit:
            raise ValueError(f"0x{token} does not fit in {int(element_width)} byte(s)")
        values.append(value)

    return np.array(values, dtype=ELEMENT_DTYPES[int(element_width)]).tobytes()


def render_c_array(text, name, element_width=ElementWidth.BYTE, source=None):
    """Wrap hex-list text in a C array declaration plus a matching size constant."""
    if not C_IDENTIFIER.match(name):
        raise ValueError(f"'{name}' is not a valid C identifier")

    c_type = C_ELEMENT_TYPES[int(ElementWidth(element_width))]
    out = []
    if source is not None:
        out.append(f"/* Auto-generated from {source} -- do not edit by hand. */\n")
    out.append(f"static const {c_type} {name}[] = {{\n")
    for line in text.splitlines():
        out.append(f"    {line}\n")
    out.append("};\n")
    out.append(f"static const unsigned int {name}_size = sizeof({name});\n")
    return "".join(out)
