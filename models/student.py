# models/student.py
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from datetime import date, datetime, time
from typing import Optional

REQUIRED_FIELDS = ("firstName", "lastName", "mobilePhone")


def _to_bson(value):
    # BSON has no date-only type, birth dates are stored as midnight datetimes
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


class StudentRecordInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    firstName: str
    lastName: str
    birthDate: Optional[date] = None
    address: Optional[str] = None
    email: Optional[str] = None
    mobilePhone: str

    def to_document(self) -> dict:
        return {k: _to_bson(v) for k, v in self.model_dump().items()}


class StudentRecordPatch(BaseModel):
    """Partial update body. Only the fields sent by the client are written."""

    model_config = ConfigDict(extra="forbid")

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    birthDate: Optional[date] = None
    address: Optional[str] = None
    email: Optional[str] = None
    mobilePhone: Optional[str] = None

    @model_validator(mode="after")
    def check_fields(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be supplied")
        for field in REQUIRED_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def to_document(self) -> dict:
        return {k: _to_bson(v) for k, v in self.model_dump(exclude_unset=True).items()}


class StudentRecord(BaseModel):
    id: str
    firstName: str
    lastName: str
    birthDate: Optional[date] = None
    address: Optional[str] = None
    email: Optional[str] = None
    mobilePhone: str

    @field_validator("birthDate", mode="before")
    @classmethod
    def strip_time(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value

    @classmethod
    def from_document(cls, doc: dict) -> "StudentRecord":
        data = {k: v for k, v in doc.items() if k != "_id"}
        data["id"] = str(doc["_id"])
        return cls(**data)
