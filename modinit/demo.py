"""Small demonstration application built from two dependent modules."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from modinit.registry import InitError, Registry


def build_registry(out: TextIO) -> Registry:
    """Create a registry with module_a and module_b, which depends on module_a."""
    reg = Registry()

    def module_a_init() -> int:
        print("Module A initialized", file=out)
        return 0

    def module_a_close() -> None:
        print("Module A closed", file=out)

    def module_b_init() -> int:
        print("Module B initialized", file=out)
        return 0

    def module_b_close() -> None:
        print("Module B closed", file=out)

    reg.register("module_a", module_a_init, module_a_close, [])
    reg.register("module_b", module_b_init, module_b_close, ["module_a"])
    return reg


def main(argv: list[str] | None = None) -> int:
    """Run the demo application and return its exit status."""
    parser = argparse.ArgumentParser(prog="modinit-demo")
    parser.add_argument(
        "--error-file",
        default="error.txt",
        help="where to write details of an initialisation failure",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    reg = build_registry(out)
    try:
        reg.init()
    except InitError as err:
        print(f"Error dumped to {args.error_file}: {err.message}", file=out)
        Path(args.error_file).write_text(
            f"code: {err.code}\nmessage: {err.message}\n", encoding="utf-8"
        )
        reg.destroy()
        return 1

    print("App is working...", file=out)
    reg.destroy()
    return 0


if __name__ == "__main__":
    sys.exit(main())