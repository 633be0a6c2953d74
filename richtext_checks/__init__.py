from richtext_checks.diagnose import diagnose
from richtext_checks.parse import MarkupParseError, parse_markup
from richtext_checks.rules import OPEN, RULES, Restricted, RuleTable
from richtext_checks.validate import validate

__all__ = [
    "OPEN",
    "RULES",
    "MarkupParseError",
    "Restricted",
    "RuleTable",
    "diagnose",
    "parse_markup",
    "validate",
]
