"""SafeMap: rule-based travel safety scoring."""

__version__ = "0.3.0"
