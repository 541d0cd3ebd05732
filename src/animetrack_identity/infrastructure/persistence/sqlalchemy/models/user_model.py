"""SQLAlchemy model for User aggregate."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from animetrack.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from animetrack_identity.infrastructure.persistence.sqlalchemy.models.user_list_entry_model import (  # noqa: E501
        UserListEntryModel,
    )


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Emails are stored lower-cased; the unique index therefore enforces
    case-insensitive uniqueness.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    list_entries: Mapped[list["UserListEntryModel"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserListEntryModel.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
