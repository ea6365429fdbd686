"""SafeBrowse - headless browser safety checks for a single page."""

__version__ = "0.1.0"
