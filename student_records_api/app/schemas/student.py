"""
Pydantic models for student records.

``StudentRecord`` is both the persisted shape and the response body.
Timestamps keep the camelCase keys (``createdAt``/``updatedAt``) used
by the data file, and unknown optional values are left out of the
serialized form rather than written as ``null``.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentRecord(BaseModel):
    """A single student as stored and as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1718000000000])
    name: str = Field(..., examples=["Ada Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
    age: Optional[int] = Field(None, examples=[21], description="Unknown when absent")
    grade: Optional[str] = Field(None, examples=["A"], description="Unset when absent")
    created_at: str = Field(..., alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the document's key names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class StudentCollection(BaseModel):
    """The whole data file: one named array of records."""

    students: List[StudentRecord] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"students": [s.to_dict() for s in self.students]}


class DeleteConfirmation(BaseModel):
    message: str = Field("Student deleted", examples=["Student deleted"])
