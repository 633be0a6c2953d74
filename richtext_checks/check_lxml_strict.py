"""
MUST HAVE REQUIREMENTS:
- Parse the provided markup as strict XML via lxml with recover disabled.
- Exit with an error message when parsing fails instead of silently fixing markup.
- Print success acknowledgement on valid input.
- Read markup from a provided path or stdin.
"""
# ----------------------------------
# Parse as strict XML with lxml (no recovery)
# ----------------------------------
import sys

from richtext_checks.log import configure_logging
from richtext_checks.parse import MarkupParseError, parse_markup


def main(argv):
    configure_logging()
    path = argv[1] if len(argv) > 1 else None
    data = sys.stdin.read() if not path else open(path).read()
    try:
        parse_markup(data)
    except MarkupParseError as exc:
        print(exc)
        return 1
    print("lxml strict ok")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
