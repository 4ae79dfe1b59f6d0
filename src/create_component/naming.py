"""Name helpers for generated units."""


def to_pascal_case(name: str) -> str:
    """Convert 'user-profile' into 'UserProfile'.

    Each hyphen-delimited segment gets its first character uppercased and
    the rest kept as-is. No character validation is performed.
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


def to_kebab_class(name: str) -> str:
    """Return the CSS class / route segment used for a unit."""
    return name.lower()
