#!/usr/bin/env python3
"""
Run richhdr as ``python -m richhdr``
"""

from richhdr.cli_main import cli


def main(argv: list[str] | None = None) -> int:
    """Run the CLI with ``argv`` (default: sys.argv) and return its exit status."""
    try:
        cli.main(args=argv, prog_name="richhdr")
    except SystemExit as exc:
        if exc.code is None or isinstance(exc.code, int):
            return exc.code or 0
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
