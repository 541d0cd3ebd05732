"""SQLAlchemy repository implementations for the catalog."""

from animetrack.infrastructure.persistence.sqlalchemy.repositories.catalog_repository import (  # noqa: E501
    CatalogRepositorySQLAlchemy,
)

__all__ = ["CatalogRepositorySQLAlchemy"]
