"""Release version."""

TERRASCAN = "v1.1.0"


def get() -> str:
    """Return the release version."""
    return TERRASCAN