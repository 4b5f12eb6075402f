from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional
from enum import Enum
from bson import ObjectId

# --- Categories ---
# Single source for the server's /categories endpoint and the client fallback.
class PlaceCategory(str, Enum):
    RESTAURANT = "Restaurant"
    CAFE = "Cafe"
    PARK = "Park"
    DOG_WALKING = "Dog Walking"
    FOREST = "Forest"
    MUSEUM = "Museum"
    SHOPPING = "Shopping"
    VIEWPOINT = "Viewpoint"
    BEACH = "Beach"
    OTHER = "Other"

PLACE_CATEGORIES: List[str] = [c.value for c in PlaceCategory]

REQUIRED_FIELDS = ("name", "description", "category", "location")

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
ADDRESS_MAX_LENGTH = 200

# --- Create payload ---
class Coordinates(BaseModel):
    lat: float
    lng: float

class Location(BaseModel):
    address: str = Field(..., min_length=1, max_length=ADDRESS_MAX_LENGTH)
    coordinates: Coordinates
    placeId: Optional[str] = None

class PlaceCreate(BaseModel):
    """Payload accepted by POST /places."""
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    category: PlaceCategory
    location: Location
    images: List[str] = []
    submittedBy: str = "Anonymous"

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("submittedBy", mode="before")
    @classmethod
    def default_submitter(cls, value):
        return value or "Anonymous"

    @field_validator("images", mode="before")
    @classmethod
    def default_images(cls, value):
        return value or []

    def to_document(self) -> Dict[str, Any]:
        doc = self.model_dump(exclude_none=True)
        doc["category"] = self.category.value
        return doc

# --- Read model ---
# Stored documents may omit any field or hold the wrong type, so reads coerce
# instead of rejecting: scalars become strings, bad numbers become None.
def _as_text(value):
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return None
    return str(value)

def _as_float(value):
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None

def _as_plain(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _as_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_as_plain(v) for v in value]
    return value

class StoredCoordinates(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def lenient_number(cls, value):
        return _as_float(value)

class StoredLocation(BaseModel):
    address: Optional[str] = None
    coordinates: Optional[StoredCoordinates] = None
    placeId: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("address", "placeId", mode="before")
    @classmethod
    def lenient_text(cls, value):
        return _as_text(value)

    @field_validator("coordinates", mode="before")
    @classmethod
    def lenient_coordinates(cls, value):
        return value if isinstance(value, dict) else None

class Place(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[StoredLocation] = None
    images: List[str] = []
    submittedBy: str = "Anonymous"
    createdAt: Any = None
    updatedAt: Any = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("id", "name", "description", "category", mode="before")
    @classmethod
    def lenient_text(cls, value):
        return _as_text(value)

    @field_validator("location", mode="before")
    @classmethod
    def lenient_location(cls, value):
        # Older documents may store the address alone
        if isinstance(value, str):
            return {"address": value}
        return value if isinstance(value, dict) else None

    @field_validator("images", mode="before")
    @classmethod
    def lenient_images(cls, value):
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            return []
        return [str(v) for v in value if v is not None and not isinstance(v, (dict, list))]

    @field_validator("submittedBy", mode="before")
    @classmethod
    def missing_submitter(cls, value):
        return _as_text(value) or "Anonymous"

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Place":
        return cls.model_validate(_as_plain(doc))

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

# --- API Response Models ---
class CategoriesResponse(BaseModel):
    categories: List[str]
