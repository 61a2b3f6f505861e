"""Convert Doxygen XML output to a Word (.docx) document.

Reads the ``index.xml`` and per-compound XML files Doxygen writes with
``GENERATE_XML = YES`` and renders every root group, with its sub-groups,
structs, functions, macros, typedefs and variables, into one document.
"""

import argparse
from pathlib import Path

from dox2docx.run_conversion import run_conversion


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert Doxygen XML output to a Word document.",
    )
    ap.add_argument(
        "xml_dir",
        type=Path,
        help="Directory containing Doxygen's index.xml and compound XML files",
    )
    ap.add_argument(
        "output",
        type=Path,
        help="Path of the .docx file to write",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args(argv)
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
