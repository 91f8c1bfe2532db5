"""Adapters for external collaborators: store, blob store, embeddings, index, parse service, web."""
