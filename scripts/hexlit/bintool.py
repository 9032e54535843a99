"""
bintool.py — Dump a file's bytes as a comma-separated list of hex literals.

Usage:
    python -m hexlit bintool <input>                     # 8 bytes per line
    python -m hexlit bintool <input> --as-u32            # 4 LE words per line
    python -m hexlit bintool <input> -g 12 -o out.inc    # 12 bytes per line
    python -m hexlit bintool <input> --array blob_data   # wrap as a C array

Example:
    python -m hexlit bintool triangle.vert.spv --as-u32

Produces:
    0x07230203, 0x00010000, 0x000D000B, 0x00000006,
    0x00000001, ...
"""

import argparse
import os
import sys

from ._common import (
    HexlitError,
    SourceUnavailable,
    c_identifier,
    positive_int,
    report_error,
    write_output,
)
from .encoder import ElementWidth, EncodingConfig, OutputStyle, encode, render_c_array


def read_input(path):
    """Read the whole file at `path`."""
    if not os.path.isfile(path):
        raise SourceUnavailable(path, f'file "{path}" not found')
    with open(path, "rb") as f:
        return f.read()


def dump(path, as_u32=False, group_size=None, raw=False, array_name=None):
    """Read `path` and return its encoded contents (str, or bytes for raw)."""
    data = read_input(path)

    if raw:
        return encode(data, EncodingConfig(), OutputStyle.RAW)

    width = ElementWidth.WORD if as_u32 else ElementWidth.BYTE
    config = EncodingConfig.for_width(width, group_size)
    text = encode(data, config)

    if array_name:
        return render_c_array(text, array_name, width, source=os.path.basename(path))
    return text


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bintool",
        description="Dump a file's bytes as hexadecimal literals.",
    )
    parser.add_argument("file", help="File to dump")
    parser.add_argument(
        "-l",
        "--as-u32",
        action="store_true",
        help="Treat the file as little-endian 32-bit words",
    )
    parser.add_argument(
        "-g",
        "--group-size",
        type=positive_int,
        help="Values per line (default: 8 bytes, or 4 words with --as-u32)",
    )
    parser.add_argument("-o", "--output", help="File to write to (default: stdout)")
    parser.add_argument(
        "--raw", action="store_true", help="Copy the bytes through unchanged"
    )
    parser.add_argument(
        "--array",
        metavar="NAME",
        type=c_identifier,
        help="Wrap the list in a C array named NAME",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Report what was written"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.raw and (args.as_u32 or args.array):
        parser.error("--raw cannot be combined with --as-u32 or --array")

    try:
        rendered = dump(
            args.file,
            as_u32=args.as_u32,
            group_size=args.group_size,
            raw=args.raw,
            array_name=args.array,
        )
        write_output(rendered, args.output)
    except (HexlitError, OSError) as err:
        report_error(err)
        return 1

    if args.verbose:
        unit = "bytes" if args.raw else "characters"
        target = args.output or "stdout"
        print(f"Wrote {len(rendered)} {unit} from {args.file} to {target}", file=sys.stderr)
    return 0
