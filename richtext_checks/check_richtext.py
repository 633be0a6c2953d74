"""
MUST HAVE REQUIREMENTS:
- Accept only the rich text tags, attributes and nesting listed in rules.py.
- Print every violation on its own line, not just the first one.
- Exit non-zero when any violation is found.
- Read markup from a provided path or stdin.
"""
# ----------------------------------
# Keep tags, attributes and nesting constrained
# ----------------------------------
import sys

from richtext_checks.log import configure_logging
from richtext_checks.validate import validate


def main(argv):
    configure_logging()
    src = sys.stdin.read() if len(argv) == 1 else open(argv[1]).read()
    errors = validate(src)
    if errors:
        print("\n".join(errors))
        return 1
    print("rich text rules satisfied")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
