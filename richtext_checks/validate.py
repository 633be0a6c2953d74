"""
MUST HAVE REQUIREMENTS:
- Reject None, non-string and whitespace-only input before parsing.
- Stop with a single error on parse failure or a root that is not body.
- Walk the tree from body and collect every grammar violation, deduplicated.
- Skip the subtree of an unsupported tag, but keep walking into children that
  are merely not allowed under their parent.
- Ignore whitespace-only text everywhere.
- Return a list of messages; an empty list means the markup is valid.
"""
# ----------------------------------
# Rich text grammar checks
# ----------------------------------
from richtext_checks.log import get_logger
from richtext_checks.parse import MarkupParseError, parse_markup
from richtext_checks.rules import RULES

log = get_logger(__name__)

WHITESPACE_ONLY = "Input XML string cannot be just whitespace. Use <body></body> for empty content."
NO_ROOT = "XML document is empty or lacks a root element. Must start with <body>."


class ErrorSet:
    """Ordered messages; the same text is kept once."""

    def __init__(self):
        self.messages = []
        self.seen = set()

    def add(self, message):
        if message in self.seen:
            return
        self.seen.add(message)
        self.messages.append(message)


# ----------------------------------
# Tree helpers
# ----------------------------------
def child_nodes(el):
    """Yield direct children in order: elements as-is, text as str."""
    if el.text:
        yield el.text
    for child in el:
        # comments and processing instructions have a non-str tag
        if isinstance(child.tag, str):
            yield child
        if child.tail:
            yield child.tail


def has_content(el):
    for node in child_nodes(el):
        if not isinstance(node, str) or node.strip():
            return True
    return False


def check_input(markup):
    if markup is None:
        return "Input XML string cannot be None."
    if not isinstance(markup, str):
        return f"Input XML must be a string, got {type(markup).__name__}."
    if not markup.strip():
        return WHITESPACE_ONLY
    return ""


# ----------------------------------
# Per-node rules
# ----------------------------------
def check_attributes(el, lineage, rules, errors):
    tag = el.tag
    where = f"on tag <{tag}> at {lineage}"
    for name, value in el.attrib.items():
        if tag not in rules.tags_with_attributes:
            errors.add(f"Tag <{tag}> does not support attributes, but found '{name}' {where}")
            continue
        if name not in rules.attribute_names(tag):
            errors.add(f"Unsupported attribute '{name}' found {where}")
        if name == "href" and not value:
            errors.add(f"Attribute 'href' cannot be empty {where}")


def check_parent(el, lineage, rules, errors):
    required = rules.required_parents.get(el.tag)
    if not required:
        return
    parent = el.getparent()
    if parent is not None and parent.tag in required:
        return
    actual = f"<{parent.tag}>" if parent is not None else "document root"
    expected = " or ".join(f"<{p}>" for p in required)
    errors.add(
        f"Tag <{el.tag}> at {lineage} must be a direct child of {expected}, but its parent is {actual}."
    )


def validate_node(el, parent_lineage, rules, errors):
    tag = el.tag
    if tag not in rules.allowed_tags:
        errors.add(f"Unsupported tag found: <{tag}> at {parent_lineage}")
        return
    lineage = f"{parent_lineage} > {tag}" if parent_lineage else tag

    check_attributes(el, lineage, rules, errors)
    if tag in rules.empty_tags and has_content(el):
        errors.add(f"Tag <{tag}> must be empty but contains content at {lineage}")
    check_parent(el, lineage, rules, errors)

    policy = rules.child_policy(tag)
    for node in child_nodes(el):
        if isinstance(node, str):
            text = node.strip()
            if text and tag in rules.no_direct_text:
                errors.add(
                    f'Text content ("{text[:20]}...") found directly inside <{tag}> at {lineage}, which is not allowed.'
                )
            continue
        # unsupported children are reported by their own visit
        if node.tag in rules.allowed_tags and not policy.allows(node.tag):
            errors.add(f"Tag <{node.tag}> is not allowed as a direct child of <{tag}> at {lineage}")
        validate_node(node, lineage, rules, errors)


# ----------------------------------
# Entry point
# ----------------------------------
def validate(markup, rules=RULES):
    bad = check_input(markup)
    if bad:
        return [bad]
    try:
        root = parse_markup(markup)
    except MarkupParseError as exc:
        return [str(exc)]
    if root is None:
        return [NO_ROOT]
    if root.tag != "body":
        return [f"Root element must be <body>, but found <{root.tag}>."]

    errors = ErrorSet()
    validate_node(root, "", rules, errors)
    log.debug("richtext_validated", errors=len(errors.messages))
    return errors.messages
