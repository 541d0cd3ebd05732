"""Catalog domain exceptions."""

from animetrack.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class MediaNotFoundError(EntityNotFoundError):
    """Media entry not found in the catalog."""

    def __init__(self, media_id: int) -> None:
        self.media_id = media_id
        super().__init__(
            f"Media entry not found: {media_id}",
            code=ErrorCode.MEDIA_NOT_FOUND,
            details={"media_id": media_id},
        )
