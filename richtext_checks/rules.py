"""
MUST HAVE REQUIREMENTS:
- Hold the rich text grammar as one immutable value built once at import.
- Keep allowed tags, attribute-bearing tags and per-tag attribute sets explicit.
- List tags that must stay empty and tags that refuse direct text.
- Map parents to allowed child tags; a parent missing from the map is open.
- Answer child lookups with OPEN or Restricted(tags), never a bare None.
- Keep required parents ordered so error messages stay stable.
"""
# ----------------------------------
# Rich text grammar
# ----------------------------------
from dataclasses import dataclass
from types import MappingProxyType

INLINE = ("strong", "em", "u", "s", "a", "code")


# ----------------------------------
# Child policy lookup results
# ----------------------------------
class Open:
    def allows(self, tag):
        return True

    def __repr__(self):
        return "OPEN"


@dataclass(frozen=True)
class Restricted:
    tags: frozenset

    def allows(self, tag):
        return tag in self.tags


OPEN = Open()


# ----------------------------------
# The table itself
# ----------------------------------
@dataclass(frozen=True)
class RuleTable:
    allowed_tags: frozenset
    tags_with_attributes: frozenset
    allowed_attributes: MappingProxyType
    empty_tags: frozenset
    allowed_children: MappingProxyType
    required_parents: MappingProxyType
    no_direct_text: frozenset

    @classmethod
    def build(
        cls,
        allowed_tags,
        allowed_attributes,
        empty_tags=(),
        allowed_children=None,
        required_parents=None,
        no_direct_text=(),
        tags_with_attributes=None,
    ):
        """Freeze plain dicts and iterables into a RuleTable.

        Tags that carry attributes default to the keys of allowed_attributes.
        """
        if tags_with_attributes is None:
            tags_with_attributes = allowed_attributes
        return cls(
            allowed_tags=frozenset(allowed_tags),
            tags_with_attributes=frozenset(tags_with_attributes),
            allowed_attributes=MappingProxyType(
                {tag: frozenset(names) for tag, names in allowed_attributes.items()}
            ),
            empty_tags=frozenset(empty_tags),
            allowed_children=MappingProxyType(
                {tag: Restricted(frozenset(kids)) for tag, kids in (allowed_children or {}).items()}
            ),
            required_parents=MappingProxyType(
                {tag: tuple(parents) for tag, parents in (required_parents or {}).items()}
            ),
            no_direct_text=frozenset(no_direct_text),
        )

    def child_policy(self, tag):
        return self.allowed_children.get(tag, OPEN)

    def attribute_names(self, tag):
        return self.allowed_attributes.get(tag, frozenset())


RULES = RuleTable.build(
    allowed_tags=(
        "body", "strong", "em", "u", "s", "a", "code", "pre", "blockquote",
        "ul", "li", "ol", "h1", "h2", "table", "tr", "td", "hr", "img",
    ),
    allowed_attributes={
        "a": (
            "href",
            "data-asana-gid",
            "data-asana-accessible",
            "data-asana-type",
            "data-asana-dynamic",
        ),
        "img": (
            "src",
            "data-asana-gid",
            "data-asana-type",
            "data-src-height",
            "data-src-width",
            "data-thumbnail-url",
            "data-thumbnail-height",
            "data-thumbnail-width",
            "alt",
            "style",
        ),
        "td": ("width", "data-cell-widths"),
    },
    empty_tags=("hr", "img"),
    allowed_children={
        "body": INLINE + ("pre", "blockquote", "ul", "ol", "h1", "h2", "table", "hr", "img"),
        "ul": ("li",),
        "ol": ("li",),
        "li": INLINE + ("ul", "ol"),
        "blockquote": INLINE + ("ul", "ol", "pre"),
        "pre": (),
        "h1": (),
        "h2": (),
        "table": ("tr",),
        "tr": ("td",),
        "td": INLINE,
        # inline tags nest each other, links never nest links
        "strong": INLINE,
        "em": INLINE,
        "u": INLINE,
        "s": INLINE,
        "a": ("strong", "em", "u", "s", "code"),
        "code": (),
    },
    required_parents={
        "li": ("ul", "ol"),
        "tr": ("table",),
        "td": ("tr",),
    },
    no_direct_text=("ul", "ol", "table", "tr"),
)
