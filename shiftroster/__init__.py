"""Doctor shift roster generation with weekly limits, shift preferences and conflict reports."""

__version__ = "0.1.0"