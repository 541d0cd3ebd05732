"""SQLAlchemy model for watch-list membership."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from animetrack.infrastructure.persistence.sqlalchemy.models import (
    Base,
    MediaEntryModel,
)

if TYPE_CHECKING:
    from animetrack_identity.infrastructure.persistence.sqlalchemy.models.user_model import (  # noqa: E501
        UserModel,
    )


class UserListEntryModel(Base):
    """One listed media entry of one user.

    The (user_id, media_id) primary key admits a single row per entry and
    user, so the database itself refuses an entry sitting in two lists.
    """

    __tablename__ = "user_list_entries"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    media_id: Mapped[int] = mapped_column(
        ForeignKey("media_entries.id"),
        primary_key=True,
    )
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user: Mapped["UserModel"] = relationship(back_populates="list_entries")
    media: Mapped[MediaEntryModel] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<UserListEntryModel(user_id={self.user_id}, "
            f"media_id={self.media_id}, category={self.category})>"
        )
