"""
compshdr.py — Compile a GLSL shader to SPIR-V and dump the result.

Compiles with glslc (the shaderc command-line driver) and writes the output
either as raw SPIR-V or as hex literals ready to paste into a C array.

Usage:
    python -m hexlit compshdr shader.vert                     # raw SPIR-V to stdout
    python -m hexlit compshdr shader.frag -m u32-list         # 4 words per line
    python -m hexlit compshdr shader.glsl -k vertex -m u8-list -o shader.inc
    python -m hexlit compshdr shader.vert -m assembly         # SPIR-V assembly as bytes
    python -m hexlit compshdr shader.vert --glslc PATH        # override glslc path

Modes:
    binary      SPIR-V binary, unchanged
    u8-list     SPIR-V binary as 8-bit values, 8 per line
    u32-list    SPIR-V binary as 32-bit words, 4 per line
    assembly    SPIR-V assembly text as 8-bit values, 8 per line

The script auto-detects glslc from:
  1. --glslc command-line flag
  2. VULKAN_SDK environment variable
  3. System PATH
"""

import argparse
import os
import shutil
import subprocess
import sys

from ._common import (
    HexlitError,
    SourceUnavailable,
    positive_int,
    report_error,
    write_output,
)
from .encoder import ElementWidth, EncodingConfig, OutputStyle, encode

SHADER_KINDS = ["infer", "vertex", "fragment"]

# mode -> (compile to assembly, element width or None for raw output)
OUTPUT_MODES = {
    "binary": (False, None),
    "u8-list": (False, ElementWidth.BYTE),
    "u32-list": (False, ElementWidth.WORD),
    "assembly": (True, ElementWidth.BYTE),
}


def find_glslc():
    """Auto-detect glslc compiler location."""
    vulkan_sdk = os.environ.get("VULKAN_SDK")
    if vulkan_sdk:
        # Windows: Bin/glslc.exe, Linux/macOS: bin/glslc
        candidates = [
            os.path.join(vulkan_sdk, "Bin", "glslc.exe"),
            os.path.join(vulkan_sdk, "bin", "glslc"),
        ]
        for glslc_path in candidates:
            if os.path.isfile(glslc_path):
                return glslc_path

    return shutil.which("glslc")


def build_command(glslc_path, shader_path, kind="infer", entrypoint="main", assembly=False):
    """Build the glslc command line; output goes to stdout."""
    cmd = [glslc_path]
    if kind != "infer":
        cmd.append(f"-fshader-stage={kind}")
    cmd.append(f"-fentry-point={entrypoint}")
    if assembly:
        cmd.append("-S")
    cmd += [shader_path, "-o", "-"]
    return cmd


def compile_shader(
    glslc_path, shader_path, kind="infer", entrypoint="main", assembly=False, verbose=False
):
    """Compile a shader and return glslc's output (SPIR-V binary or assembly) as bytes."""
    if not os.path.isfile(shader_path):
        raise SourceUnavailable(shader_path, f'file "{shader_path}" not found')

    cmd = build_command(glslc_path, shader_path, kind, entrypoint, assembly)
    if verbose:
        print(f"  $ {' '.join(cmd)}", file=sys.stderr)

    try:
        result = subprocess.run(cmd, capture_output=True)
    except OSError as e:
        raise SourceUnavailable(glslc_path, f"could not run {glslc_path}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise SourceUnavailable(
            shader_path,
            f"compilation failed for {os.path.basename(shader_path)}:\n    {stderr}",
        )
    return result.stdout


def render(data, mode, group_size=None):
    """Encode compiler output for the given output mode."""
    _, width = OUTPUT_MODES[mode]
    if width is None:
        return encode(data, EncodingConfig(), OutputStyle.RAW)
    return encode(data, EncodingConfig.for_width(width, group_size))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="compshdr",
        description="Compile a GLSL shader to SPIR-V and dump it as binary or hex literals.",
    )
    parser.add_argument("input", help="The shader file to compile")
    parser.add_argument(
        "-k",
        "--kind",
        choices=SHADER_KINDS,
        default="infer",
        help="What kind of shader this is (default: infer from the file extension)",
    )
    parser.add_argument(
        "-e", "--entrypoint", default="main", help="The entry point of the shader"
    )
    parser.add_argument(
        "-o", "--output", help="The file to write the shader to (default: stdout)"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=list(OUTPUT_MODES),
        default="binary",
        help="How to output the compiled shader (default: binary)",
    )
    parser.add_argument(
        "-g",
        "--group-size",
        type=positive_int,
        help="Values per line for list modes (default: 8 bytes, or 4 words)",
    )
    parser.add_argument("--glslc", help="Path to glslc compiler (auto-detected if not set)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show compilation commands"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        glslc_path = args.glslc or find_glslc()
        if glslc_path is None:
            raise SourceUnavailable(
                "glslc",
                "could not find glslc compiler; set VULKAN_SDK or pass --glslc PATH",
            )
        if args.verbose:
            print(f"Using glslc: {glslc_path}", file=sys.stderr)

        assembly, _ = OUTPUT_MODES[args.mode]
        data = compile_shader(
            glslc_path,
            args.input,
            kind=args.kind,
            entrypoint=args.entrypoint,
            assembly=assembly,
            verbose=args.verbose,
        )
        write_output(render(data, args.mode, args.group_size), args.output)
    except (HexlitError, OSError) as err:
        report_error(err)
        return 1

    if args.verbose:
        print(f"  {args.mode}: {len(data)} bytes compiled", file=sys.stderr)
    return 0
