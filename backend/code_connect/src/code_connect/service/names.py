"""
Naming helpers for turning design tool names into code.

Design tools append node ids to property names (e.g. ``Label#12:3``), allow any
characters in names and use free-form strings for variant options. These
helpers derive the design-facing name, a code identifier and a value slug.
"""
import regex as re

# "#12:3" style node-id annotations, anywhere in the name
NODE_ID_PATTERN = re.compile(r"#[0-9:]*")
# A node-id annotation at the end of the name only
TRAILING_NODE_ID_PATTERN = re.compile(r"#[0-9:]+$")
ILLEGAL_PROP_CHARS_PATTERN = re.compile(r"[^a-zA-Z0-9\s]")
ILLEGAL_VALUE_CHARS_PATTERN = re.compile(r"[^a-zA-Z0-9]")
# Words split on separators, case boundaries ("HTMLLabel" -> HTML, Label) and digit runs
WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

BOOLEAN_KINDS = frozenset({"true", "false", "yes", "no", "on", "off"})


def normalize_property_name(name: str) -> str:
    """Design property name without node-id annotations, as referenced in figma.* calls."""
    return NODE_ID_PATTERN.sub("", name)


def camel_case(text: str) -> str:
    words = WORD_PATTERN.findall(text)
    return "".join(
        word.lower() if index == 0 else word[:1].upper() + word[1:].lower()
        for index, word in enumerate(words)
    )


def to_code_property_name(name: str) -> str:
    """
    Derive a lower-camel-case code prop name from a raw design property name.

    Uniqueness across properties is not guaranteed: "Size" and "size#1:2" both
    become "size". Names with no usable characters become "prop" and names
    starting with a digit get a "_" prefix.
    """
    cleaned = TRAILING_NODE_ID_PATTERN.sub("", name)
    cleaned = ILLEGAL_PROP_CHARS_PATTERN.sub("", cleaned)
    identifier = camel_case(cleaned)
    if not identifier:
        return "prop"
    if identifier[0].isdigit():
        return f"_{identifier}"
    return identifier


def to_value_slug(value: str) -> str:
    """Kebab-ish slug for a variant option, e.g. "Extra Large" -> "extra-large"."""
    return ILLEGAL_VALUE_CHARS_PATTERN.sub("-", value).lower()


def normalize_component_name(name: str) -> str:
    """PascalCase identifier for a component derived from a file or design name."""
    parts = [part for part in re.split(r"[^A-Za-z0-9]+", name) if part]
    identifier = "".join(part[:1].upper() + part[1:] for part in parts)
    if not identifier:
        return "Component"
    if identifier[0].isdigit():
        return f"_{identifier}"
    return identifier


def is_boolean_kind(value: str) -> bool:
    return value.lower() in BOOLEAN_KINDS


def is_binary_boolean_variant(options) -> bool:
    """
    True when a variant has exactly two options that both read as booleans
    (true/false, yes/no, on/off in any casing). Such variants are mapped to
    figma.boolean rather than a two-case figma.enum.
    """
    if not options or len(options) != 2:
        return False
    return all(is_boolean_kind(option) for option in options)
