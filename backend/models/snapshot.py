from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List
from backend.models.records import SurveyRecord, IssueRecord

class DataSnapshot(BaseModel):
    """
    Both collections as they stand, with their sizes and the time the snapshot was taken.
    Serialized with the camelCase keys the web client reads (totalSurveys, totalIssues).
    """
    surveys: List[SurveyRecord] = Field(default_factory=list)
    issues: List[IssueRecord] = Field(default_factory=list)
    total_surveys: int = Field(default=0, serialization_alias="totalSurveys")
    total_issues: int = Field(default=0, serialization_alias="totalIssues")
    timestamp: str
