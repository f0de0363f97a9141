# docrender/__main__.py
"""
Render a Markdown document from the command line.

    python -m docrender post.md
    python -m docrender post.md --json
    cat post.md | python -m docrender - --toc
    python -m docrender --css github-dark > highlight.css
"""

import argparse
import json
import logging
import sys

from .config import RenderOptions
from .highlighting import highlight_stylesheet
from .renderer import render_markdown

logger = logging.getLogger("docrender")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="docrender",
        description="Render extended Markdown to HTML and extract its table of contents",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help='Markdown file to render, or "-" for stdin (default)',
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print {html, headings} as JSON instead of bare HTML",
    )
    parser.add_argument(
        "--toc",
        action="store_true",
        help="Print only the heading list, one heading per line",
    )
    parser.add_argument(
        "--number-headings",
        action="store_true",
        help="Add outline numbers (1, 1.2, ...) to the headings",
    )
    parser.add_argument(
        "--prefix",
        default="toc-",
        help='Prefix for heading ids (default: "toc-")',
    )
    parser.add_argument(
        "--no-sanitize",
        action="store_true",
        help="Skip HTML sanitization (trusted input only)",
    )
    parser.add_argument(
        "--css",
        metavar="STYLE",
        help="Print the Pygments stylesheet for STYLE and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def _read_source(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.css:
        sys.stdout.write(highlight_stylesheet(args.css))
        return 0

    try:
        text = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    options = RenderOptions(
        heading_id_prefix=args.prefix,
        number_headings=args.number_headings,
        sanitize=not args.no_sanitize,
    )
    document = render_markdown(text, options)

    if args.json:
        json.dump(document.to_dict(), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    elif args.toc:
        for heading in document.headings:
            indent = "  " * (heading.level - 1)
            number = f"{heading.number} " if heading.number else ""
            sys.stdout.write(f"{indent}{number}{heading.title} (#{heading.id})\n")
    else:
        sys.stdout.write(document.html)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
