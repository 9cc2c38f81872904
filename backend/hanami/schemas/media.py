"""Media Schemas: favorite toggle and media quota levels."""

from pydantic import BaseModel, Field, StrictBool


class FavoriteUpdate(BaseModel):
    """Body of PATCH /api/student-media/{id}/favorite. Strict: "true" is rejected."""
    is_favorite: StrictBool


class QuotaLevelCreate(BaseModel):
    level_name: str = Field(min_length=1, max_length=50)
    video_limit: int = Field(gt=0)
    photo_limit: int = Field(gt=0)
    storage_limit_mb: int = Field(gt=0)
    video_size_limit_mb: int = Field(20, gt=0)
    photo_size_limit_mb: int = Field(1, gt=0)
    description: str | None = None
    is_active: bool = True
