"""
MUST HAVE REQUIREMENTS:
- Parse markup as strict XML via lxml with recover disabled.
- Never resolve entities or touch the network while parsing.
- Raise MarkupParseError with one readable message instead of fixing markup.
- Treat a parsererror marker root as a parse failure too.
"""
# ----------------------------------
# Strict XML parse adapter
# ----------------------------------
from lxml import etree

from richtext_checks.log import get_logger

log = get_logger(__name__)


class MarkupParseError(Exception):
    pass


def strict_parser():
    return etree.XMLParser(recover=False, resolve_entities=False, no_network=True)


def parse_markup(markup):
    try:
        root = etree.fromstring(markup.encode(), parser=strict_parser())
    except etree.XMLSyntaxError as exc:
        log.debug("richtext_parse_failed", error=str(exc))
        raise MarkupParseError(f"XML is not well-formed: {exc}") from exc
    except ValueError as exc:
        log.debug("richtext_parse_failed", error=str(exc))
        raise MarkupParseError(f"Failed to parse XML: {exc}") from exc
    if root is not None and root.tag == "parsererror":
        detail = " ".join("".join(root.itertext()).split())
        raise MarkupParseError(f"XML is not well-formed: {detail or 'Parser error detected.'}")
    return root
