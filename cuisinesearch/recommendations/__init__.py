"""
Restaurant search and ranking engine.

Responsibilities:
- Resolve cuisine ids to display names.
- Turn raw query parameters into sparse search criteria.
- Score every restaurant against the criteria with edit and numeric distances.
- Return a deterministic ordering and its bounded top slice.
"""
