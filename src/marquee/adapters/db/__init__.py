"""Database plumbing: engine factory, metadata, column types and tables."""
