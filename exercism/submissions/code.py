"""Normalization of submitted source code."""


def normalize_code(code: str) -> str:
    """Strip trailing newlines, keeping leading and internal blank lines."""
    return code.rstrip("\n")
