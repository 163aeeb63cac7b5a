import argparse
import json
import sys

from f95postparser import extract_data_from_html
from f95postparser.logging_config import logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def read_html(path):
    """Reads the HTML to parse, `-` reads from stdin."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extract the structured data of an F95Zone post body")
    parser.add_argument("file", help="HTML file of a thread page or of a post body, '-' for stdin")
    parser.add_argument("--indent", type=int, default=2, help="Indentation of the JSON output")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Overrides LOG_LEVEL (DEBUG prints the parsed tree)",
    )
    args = parser.parse_args(argv)

    if args.log_level:
        logger.setLevel(args.log_level)

    try:
        html_content = read_html(args.file)
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 1

    elements = extract_data_from_html(html_content)
    print(json.dumps([e.to_dict() for e in elements], indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
