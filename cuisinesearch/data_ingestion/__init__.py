"""
Tabular data ingestion for the restaurant search service.

Responsibilities:
- Read the cuisines and restaurants CSV sources.
- Validate column counts and numeric fields (all-or-nothing).
- Strip known contamination substrings from name-like fields.
- Produce typed restaurant records for the ranking layer.
"""
