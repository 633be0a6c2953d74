"""
MUST HAVE REQUIREMENTS:
- Run only after a remote create/update call has already failed.
- Return a JSON-ready dict with the original error under "error".
- Attach grammar findings and a hint only when the markup is actually invalid.
"""
from richtext_checks.rules import RULES
from richtext_checks.validate import validate

HINT = "The request probably failed because the rich text markup is invalid."


def diagnose(error, markup, rules=RULES):
    out = {"error": str(error)}
    if markup is None:
        return out
    found = validate(markup, rules=rules)
    if found:
        out["xml_validation_errors"] = found
        out["hint"] = HINT
    return out
