"""Shared errors and output helpers for the hexlit tools."""

import argparse
import re
import sys

C_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class HexlitError(Exception):
    """Base class for every error the hexlit tools report."""


class EncodeError(HexlitError):
    """The buffer or configuration was rejected before rendering."""


class NotMultipleOfWordSize(EncodeError):
    def __init__(self, length):
        super().__init__(f"input length {length} is not a multiple of four")
        self.length = length


class InvalidGroupSize(EncodeError):
    def __init__(self, group_size):
        super().__init__(f"group size must be a positive integer, got: {group_size}")
        self.group_size = group_size


class SourceUnavailable(HexlitError):
    """The byte buffer could not be obtained (missing file, compiler failure)."""

    def __init__(self, resource, message=None):
        super().__init__(message or f'"{resource}" not found')
        self.resource = resource


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def write_output(rendered, path=None):
    """Write encoded text or raw bytes to `path`, or to stdout, then flush."""
    binary = isinstance(rendered, (bytes, bytearray))

    if path is not None:
        mode = "wb" if binary else "w"
        encoding = None if binary else "utf-8"
        with open(path, mode, encoding=encoding) as f:
            f.write(rendered)
            f.flush()
        return

    out = sys.stdout.buffer if binary else sys.stdout
    out.write(rendered)
    out.flush()


def report_error(err):
    """Print a one-line diagnostic for `err` plus any chained causes."""
    print(f"error: {err}", file=sys.stderr)
    cause = err.__cause__
    while cause is not None:
        print(f"  caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------


def positive_int(value):
    """argparse type: a positive integer, decimal or 0x-prefixed."""
    try:
        number = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got: {value}")
    return number


def c_identifier(value):
    """argparse type: a name usable as a C variable."""
    if not C_IDENTIFIER.match(value):
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid C identifier")
    return value
