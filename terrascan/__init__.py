"""Infrastructure-as-code scanning helpers: results, policy types, documents, coloring and logging."""

__version__ = "1.1.0"