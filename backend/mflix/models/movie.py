"""
Movie request/response models.

Movie documents themselves stay plain dicts: the sample_mflix schema is
owned by the dataset, so only the listing envelope and the update payload
are modelled here.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class MoviePage(BaseModel):
    movies: List[Dict[str, Any]]
    totalPages: int


class MovieUpdate(BaseModel):
    """
    Allow-list of updatable movie fields.

    Unknown keys are rejected instead of being `$set` blindly; every field is
    optional so a body only touches what it names.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    year: Optional[StrictInt] = Field(None, ge=1800, le=2200)
    plot: Optional[str] = None
    fullplot: Optional[str] = None
    genres: Optional[List[str]] = None
    runtime: Optional[StrictInt] = Field(None, ge=0)
    rated: Optional[str] = None
    cast: Optional[List[str]] = None
    directors: Optional[List[str]] = None
    writers: Optional[List[str]] = None
    languages: Optional[List[str]] = None
    countries: Optional[List[str]] = None
    poster: Optional[str] = None
    type: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)
