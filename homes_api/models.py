from typing import Optional, Dict, Any, Mapping
from pydantic import BaseModel, Field, field_validator

# Content columns, in table order. Also the allow-list for partial updates.
FIELDS = ("area", "floor", "rooms", "price", "currency")

class HomeIn(BaseModel):
    """Full Home body, as accepted by POST and PUT."""
    area: str = Field(..., description="Living area")
    floor: str
    rooms: str
    price: str
    currency: str = Field(..., description="Currency code of `price`, e.g. USD")

    @classmethod
    def from_json(cls, body: Mapping[str, Any]) -> "HomeIn":
        """
        Build from an already-decoded JSON mapping, for callers outside the HTTP
        layer (FastAPI parses request bodies itself). Raises
        pydantic.ValidationError when a field is missing or not a string.
        """
        return cls.model_validate(body)

    def to_row(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in FIELDS}

class HomePatch(BaseModel):
    """Sparse Home body for PATCH: only the fields present are applied."""
    area: Optional[str] = None
    floor: Optional[str] = None
    rooms: Optional[str] = None
    price: Optional[str] = None
    currency: Optional[str] = None

    @field_validator(*FIELDS, mode="before")
    @classmethod
    def _not_null(cls, v):
        # defaults are not validated, so this only fires for an explicit null
        if v is None:
            raise ValueError("must be a string, not null")
        return v

    def changes(self) -> Dict[str, str]:
        return self.model_dump(include=set(FIELDS), exclude_unset=True)

class Home(HomeIn):
    # Assigned by storage
    id: Optional[int] = Field(None, description="Primary key")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Home":
        return cls(id=row["id"], **{name: row[name] for name in FIELDS})

    def to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.id is not None:
            out["id"] = self.id
        out.update(self.to_row())
        return out
