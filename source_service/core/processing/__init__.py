"""
Source ingestion pipeline.

Enrichment -> dispatch -> extraction -> chunking -> embedding -> upsert -> status.
"""
