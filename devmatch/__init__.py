"""DevMatch: match software project owners with collaborators."""

__version__ = "0.1.0"
