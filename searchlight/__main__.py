"""
Command line search over a PDF file.

    python -m searchlight FILE QUERY [QUERY ...]
"""
import argparse
import logging
import sys
from typing import List, Optional

from searchlight.core.document import PDFDocumentReader
from searchlight.core.search import SearchController
from searchlight.exceptions import SearchlightError
from searchlight.logging_utils import configure_logging
from searchlight.utils.settings import load_settings

logger = logging.getLogger("searchlight")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searchlight",
        description="Find text in a PDF, tolerant of broken whitespace and typos.",
    )
    parser.add_argument("file", help="PDF file to search")
    parser.add_argument("queries", nargs="+", metavar="QUERY",
                        help="Query text; several queries run as separate contexts")
    parser.add_argument("--case-sensitive", action="store_true", default=None)
    parser.add_argument("--no-flexible-whitespace", dest="flexible_whitespace",
                        action="store_false", default=None)
    parser.add_argument("--fuzzy", action="store_true", default=None)
    parser.add_argument("--threshold", dest="fuzzy_threshold", type=float, default=None,
                        help="Fuzzy similarity threshold between 0.0 and 1.0")
    parser.add_argument("--settings", default=None, help="Settings JSON file")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a search and print one line per match.

    Returns:
        Process exit code: 0 with matches, 1 without, 2 on error
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    overrides = {
        key: value
        for key, value in (
            ("case_sensitive", args.case_sensitive),
            ("flexible_whitespace", args.flexible_whitespace),
            ("fuzzy", args.fuzzy),
            ("fuzzy_threshold", args.fuzzy_threshold),
        )
        if value is not None
    }

    reader = PDFDocumentReader()
    try:
        settings = load_settings(args.settings) if args.settings else None
        controller = SearchController(settings=settings)
        reader.load_pdf(args.file)
        document = reader.build_document()
        controller.set_document(document)

        if len(args.queries) == 1:
            total = controller.search(args.queries[0], overrides)
        else:
            total = controller.search_multiple(args.queries, overrides)
    except SearchlightError as e:
        logger.error("%s", e.message)
        return 2
    finally:
        reader.close_document()

    for index, match in enumerate(controller.matches):
        page = document[match.page_index]
        print(f"{match.page_index + 1}:{index} [{match.context_index}] {match.text(page)}")

    if len(args.queries) > 1:
        for query, count in zip(args.queries, controller.context_counts):
            print(f"{query!r}: {count}", file=sys.stderr)
    print(f"{total} match(es)", file=sys.stderr)

    controller.destroy()
    return 0 if total else 1


if __name__ == "__main__":
    sys.exit(main())
