from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class SurveyRecord(BaseModel):
    """One household water-usage survey. Never mutated once stored."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Assigned by the surveys store")
    name: str = Field(..., min_length=1, examples=["Alice"])
    usage: int = Field(..., description="Liters per day", examples=[120])
    timestamp: str = Field(..., examples=["10/18/2026, 3:04:05 PM"])

class IssueRecord(BaseModel):
    """One reported water or sanitation problem. Never mutated once stored."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Assigned by the issues store")
    location: str = Field(..., min_length=1, examples=["Ward 7 public tap"])
    problem: str = Field(..., min_length=1, examples=["Tap leaking since Monday"])
    timestamp: str = Field(..., examples=["10/18/2026, 3:04:05 PM"])

# ---- request bodies ----
# Fields stay loose; WaterDataService checks presence and coercion so a bad
# submission comes back as a 400 with a readable message.
class SurveySubmission(BaseModel):
    name: Optional[Any] = Field(default=None, examples=["Alice"])
    usage: Optional[Any] = Field(default=None, examples=[120])
    timestamp: Optional[Any] = Field(default=None, description="Client-side time; server time is used when absent")

class IssueSubmission(BaseModel):
    location: Optional[Any] = Field(default=None, examples=["Ward 7 public tap"])
    problem: Optional[Any] = Field(default=None, examples=["Tap leaking since Monday"])
    timestamp: Optional[Any] = None

# ---- response bodies ----
class SurveyResponse(BaseModel):
    message: str
    data: SurveyRecord

class IssueResponse(BaseModel):
    message: str
    data: IssueRecord
