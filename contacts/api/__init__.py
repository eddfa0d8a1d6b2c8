"""HTTP API exposing contact indexing, unindexing, search and validation."""
