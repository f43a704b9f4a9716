"""AI reply generation for text selected in a mail composer."""

__version__ = "0.1.0"
