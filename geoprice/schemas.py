from enum import Enum
from typing import Generic, List, Optional, Tuple, TypeVar
from pydantic import BaseModel, ConfigDict, Field

class LandType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    AGRICULTURAL = "agricultural"

LAND_TYPES = tuple(t.value for t in LandType)

class LandArea(BaseModel):
    """
    A named polygon with price metadata. Field names are snake_case in
    Python and camelCase on the wire.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)

    id: str
    name: str = Field(min_length=1)
    # Closed ring of (lat, lng); empty means no renderable geometry
    coordinates: List[Tuple[float, float]] = Field(default_factory=list)
    price_per_sq_ft: float = Field(gt=0, alias="pricePerSqFt")
    total_area: float = Field(gt=0, alias="totalArea")
    description: Optional[str] = None
    type: LandType

class AddLocationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    type: LandType
    estimated_price: float = Field(gt=0, alias="estimatedPrice")

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None
