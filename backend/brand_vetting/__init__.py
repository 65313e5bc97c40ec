"""Brand authenticity / greenwashing vetting engine."""

__version__ = "0.1.0"
