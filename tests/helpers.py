"""Small assertion helpers shared by the test modules."""


def said(narrator, fragment):
    """Whether any narrated line contains ``fragment``."""
    return any(fragment in line for line in narrator.lines)
