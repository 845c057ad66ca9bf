"""Ingestion, reconciliation, search and chapter detection."""
