"""Wedding site server: static assets, live photo listing and link-preview metadata."""

__version__ = "1.0.0"
