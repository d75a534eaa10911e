"""PDF Organizer - rank local documents against a topic, fall back to Google Scholar."""

__version__ = "0.1.0"
