"""Link preview extraction: page title and preview image for arbitrary URLs."""

__version__ = "0.1.0"
