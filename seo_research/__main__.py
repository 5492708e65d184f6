"""
Command line entry point.

Usage:
    python -m seo_research paper.json
    python -m seo_research paper.yaml --research keywordCountInUrl --rules rules.yaml

The paper file holds the Paper fields (text, keyword, synonyms, title,
description, slug, url, locale). Results are printed as JSON on stdout.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .config import load_config, load_environment
from .errors import ResearchError
from .logging_config import setup_logging
from .paper import Paper
from .researcher import analyze

logger = logging.getLogger(__name__)


def load_paper(path: str) -> Paper:
    """
    Read a Paper from a JSON or YAML file.

    Raises:
        ValueError: file content is not a mapping
        OSError: file cannot be read
    """
    file_path = Path(path)
    with open(file_path, "r", encoding="utf-8") as f:
        if file_path.suffix.lower() in (".yaml", ".yml"):
            data: Any = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of paper fields")
    return Paper.from_dict(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-research",
        description="Run keyphrase and readability researches on a document",
    )
    parser.add_argument("paper", help="JSON or YAML file with the paper fields")
    parser.add_argument("--rules", help="YAML morphology rule table (default: $SEO_RESEARCH_RULES_PATH)")
    parser.add_argument(
        "--research",
        action="append",
        dest="researches",
        metavar="NAME",
        help="Research to run, repeatable (default: all)",
    )
    parser.add_argument("--log-level", default=None, help="Console log level (default: $LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="Session log file (default: $SEO_RESEARCH_LOG_FILE)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment()
    log_level = (args.log_level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    setup_logging(
        log_file=args.log_file or os.getenv("SEO_RESEARCH_LOG_FILE"),
        console_level=getattr(logging, log_level, logging.WARNING),
    )

    try:
        paper = load_paper(args.paper)
        config = load_config(args.rules)
        results: Dict[str, Any] = analyze(paper, config, args.researches)
    except (ResearchError, ValidationError, ValueError, OSError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print(json.dumps(results, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
