"""LandSite: content API for a bilingual landscaping company website."""

__version__ = "0.1.0"
