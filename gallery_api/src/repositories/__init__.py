"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for the gallery read path and
return plain rows; joining and defaulting happen in the service layer.
"""
