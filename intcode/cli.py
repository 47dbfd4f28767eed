#!/usr/bin/env python3
"""
Intcode CLI — run, inspect and solve with the Intcode virtual machine
Commands: run · disasm · solve · version
"""

import argparse
import logging
import sys

from intcode import __version__


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _parse_inputs(raw):
    """argparse type for ``-i 1,2,3``."""
    from intcode.program import ParseError, parse_program
    if not raw.strip():
        return []
    try:
        return parse_program(raw)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _fail(kind, err):
    print(f"❌ {kind}: {err}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# sub-command handlers
# ---------------------------------------------------------------------------

def cmd_run(args):
    """intcode run program.txt [-i 1,2] [--trace] [-v]"""
    from intcode.program import ParseError
    from intcode.vm import Interpreter, VMError
    try:
        vm = Interpreter.from_file(args.input, trace=args.trace)
        out = vm.run(args.inputs)
    except ParseError as e:
        _fail("Parse error", e)
    except VMError as e:
        _fail("Runtime error", e)
    for value in out:
        print(value)
    if args.verbose:
        print(f"\n[VM] steps={vm.steps} pointer={vm.pointer} relative_base={vm.relative_base}")
        print(f"[VM] memory={len(vm.memory)} cells")


def cmd_disasm(args):
    """intcode disasm program.txt"""
    from intcode.program import ParseError, disassemble, load_program
    try:
        program = load_program(args.input)
    except ParseError as e:
        _fail("Parse error", e)
    print(disassemble(program))


def cmd_solve(args):
    """intcode solve DAY PART < input.txt"""
    from intcode.program import ParseError
    from intcode.puzzles import SolverError, UnknownPuzzle, solve
    from intcode.vm import VMError
    text = sys.stdin.read()
    try:
        print(solve(args.day, args.part, text))
    except ParseError as e:
        _fail("Parse error", e)
    except UnknownPuzzle as e:
        _fail("Error", e)
    except (VMError, SolverError) as e:
        _fail("Runtime error", e)


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="intcode",
        description=(
            f"Intcode {__version__} — resumable Intcode virtual machine\n\n"
            "  run        Run a program to halt and print its output\n"
            "  disasm     Disassemble a program\n"
            "  solve      Solve a puzzle day/part from stdin\n"
            "  version    Show version info\n"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"Intcode {__version__}"
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    # ── run ────────────────────────────────────────────────────────────────
    p_run = sub.add_parser("run", help="Run a program to halt")
    p_run.add_argument("input", help="comma-separated program file")
    p_run.add_argument("-i", "--inputs", type=_parse_inputs, default=[],
                       metavar="1,2,3", help="Input values, in order")
    p_run.add_argument("--trace", action="store_true", help="Trace execution")
    p_run.add_argument("-v", "--verbose", action="store_true", help="Show register summary")
    p_run.set_defaults(func=cmd_run)

    # ── disasm ─────────────────────────────────────────────────────────────
    p_dis = sub.add_parser("disasm", help="Disassemble a program")
    p_dis.add_argument("input", help="comma-separated program file")
    p_dis.set_defaults(func=cmd_disasm)

    # ── solve ──────────────────────────────────────────────────────────────
    p_solve = sub.add_parser("solve", help="Solve a puzzle, reading its input from stdin")
    p_solve.add_argument("day", type=int)
    p_solve.add_argument("part", type=int)
    p_solve.set_defaults(func=cmd_solve)

    # ── version ────────────────────────────────────────────────────────────
    p_ver = sub.add_parser("version", help="Show version info")
    p_ver.set_defaults(func=lambda _: print(f"Intcode {__version__}"))

    # ── dispatch ───────────────────────────────────────────────────────────
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "trace", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
