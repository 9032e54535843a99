"""hexlit — Dump binary data as grouped hexadecimal literals for embedding in C sources.

Provides two tools sharing one encoder:

    python -m hexlit bintool <file> [--as-u32]       # dump a file's bytes
    python -m hexlit compshdr <shader> [-m MODE]     # compile with glslc, dump SPIR-V

Requires: pip install numpy
"""

from ._common import (
    EncodeError,
    HexlitError,
    InvalidGroupSize,
    NotMultipleOfWordSize,
    SourceUnavailable,
)
from .encoder import (
    ElementWidth,
    EncodingConfig,
    OutputStyle,
    encode,
    parse_hex_list,
    render_c_array,
    validate,
)

__all__ = [
    "ElementWidth",
    "EncodeError",
    "EncodingConfig",
    "HexlitError",
    "InvalidGroupSize",
    "NotMultipleOfWordSize",
    "OutputStyle",
    "SourceUnavailable",
    "encode",
    "parse_hex_list",
    "render_c_array",
    "validate",
]
