"""Rule-based prose linter that flags AI-sounding writing."""

__version__ = "0.1.0"