"""Domain layer - catalog records and the search query language."""
