"""Main orchestration script for running Doxygen and building the Word document."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Doxygen XML and convert it to a Word document."
    )
    parser.add_argument(
        "--doxyfile",
        help="Run doxygen with this Doxyfile before converting",
    )
    parser.add_argument(
        "--xml-dir",
        default="xml",
        help="Directory holding Doxygen's XML output (default: xml)",
    )
    parser.add_argument(
        "--output",
        default="documentation.docx",
        help="Word document to write (default: documentation.docx)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = parser.parse_args()

    if args.doxyfile:
        # 1. Generate XML using doxygen
        print("--- Step 1: Generating Doxygen XML ---")
        doxyfile = Path(args.doxyfile)
        run_command(["doxygen", doxyfile.name], cwd=doxyfile.parent.resolve())

    # 2. Convert XML to a Word document
    print("\n--- Step 2: Converting XML to Word ---")
    cmd = [
        sys.executable,
        "-m",
        "dox2docx.doxygen_xml_to_docx",
        args.xml_dir,
        args.output,
    ]
    if args.config:
        cmd.extend(["--config", args.config])
    if args.verbose:
        cmd.append("--verbose")

    run_command(cmd)

    print(f"\nSUCCESS: Documentation written to {args.output}")


if __name__ == "__main__":
    main()
