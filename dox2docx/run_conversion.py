"""Orchestration logic for converting Doxygen XML to a Word document."""

import argparse
import logging
from pathlib import Path

from dox2docx.compound_loader import CompoundLoader, ParserCache
from dox2docx.compound_walker import CompoundWalker
from dox2docx.docx_generator import DocxGenerator
from dox2docx.load_config import load_config
from dox2docx.parser_error import ParserError
from dox2docx.run_logging import configure_logging

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline and return the process exit code."""
    tracker = configure_logging(verbose=args.verbose)
    config = load_config(args.config)

    xml_dir = Path(args.xml_dir)
    if not (xml_dir / "index.xml").exists():
        msg = f"No index.xml found under: {xml_dir}"
        raise SystemExit(msg)

    loader = CompoundLoader(xml_dir, ParserCache())
    try:
        project = CompoundWalker(loader).parse()
    except ParserError:
        logger.exception("Failed to parse Doxygen XML in %s", xml_dir)
        return 1

    DocxGenerator(config).generate(project, Path(args.output))

    if tracker.has_errors:
        logger.error("Completed with errors")
        return 1
    if tracker.has_warnings:
        logger.warning("Completed with warnings")
    return 0
