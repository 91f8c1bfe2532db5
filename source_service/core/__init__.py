"""Core business logic for the source ingestion worker."""
