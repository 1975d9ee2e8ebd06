"""Logic for reading free-form text values from YAML."""


def as_text(v: object) -> str | None:
    """Convert a value to docstring text, joining lists of lines.

    Unlike plain ``str()``, missing values stay ``None`` so callers can tell
    an absent docstring from an empty one. Indentation is kept because
    plaintext docstrings are rendered preformatted.
    """
    if v is None:
        return None
    if isinstance(v, str):
        return v
    if isinstance(v, list):
        return "\n".join(str(x) for x in v if x is not None)
    return str(v)
