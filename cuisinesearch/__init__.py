"""
Restaurant search service.

Loads cuisines and restaurants from CSV sources, ranks them against sparse
multi-field queries, and serves the results over a small FastAPI app.
"""
