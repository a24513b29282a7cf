"""Concert Catalog - browse and search concert recordings by artist."""

__version__ = "0.1.0"
