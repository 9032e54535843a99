"""CLI entry point for the hexlit package.

Invoke as:  python -m hexlit bintool <file>
       or:  python scripts/hexlit compshdr <shader>
"""

# Bootstrap: when run as `python scripts/hexlit` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("hexlit", run_name="__main__", alter_sys=True)
    raise SystemExit(0)

import sys

from . import bintool, compshdr

TOOLS = {
    "bintool": bintool.main,
    "compshdr": compshdr.main,
}


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help"):
        print("usage: python -m hexlit {bintool,compshdr} [args...]")
        print("\nTools:")
        print("  bintool   Dump a file's bytes as hexadecimal literals")
        print("  compshdr  Compile a GLSL shader to SPIR-V and dump it")
        return 0 if argv else 1

    tool = TOOLS.get(argv[0])
    if tool is None:
        print(f"Unknown tool '{argv[0]}'. Choose from: {', '.join(TOOLS)}", file=sys.stderr)
        return 1
    return tool(argv[1:])


if __name__ == "__main__":
    sys.exit(main())
