"""animetrack - shared domain and infrastructure for watch-list tracking.

User accounts and the per-user watch lists live in animetrack_identity;
this package holds what both sides share: the error hierarchy, the media
catalog, logging setup and the SQLAlchemy base.
"""
