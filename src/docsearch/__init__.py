"""docsearch — ingest documentation pages into Weaviate and search them by meaning."""

__version__ = "0.1.0"
