from __future__ import annotations
from typing import Any, Optional

from backend.core.config import settings
from backend.core.utils import locale_timestamp, parse_int
from backend.models.records import SurveyRecord, IssueRecord
from backend.models.snapshot import DataSnapshot
from backend.services.collection_store import CollectionStore
from backend.services.errors import InvalidFieldError, MissingFieldError

def _storable(text: str, field: str) -> str:
    # lone surrogates (e.g. a "\ud800" escape in the request JSON) cannot be written out
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidFieldError(f"{field} is not valid text")
    return text

def _text(value: Any, field: str) -> Optional[str]:
    """Trimmed text, or None when the value is absent or blank."""
    if value is None:
        return None
    text = _storable(str(value).strip(), field)
    return text or None

def _timestamp(value: Any) -> str:
    """Client time kept as sent; server locale time when none was sent."""
    if value is None or value == "":
        return locale_timestamp()
    return _storable(str(value), "timestamp")

def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

class WaterDataService:
    """
    The five operations the HTTP layer exposes, over one store per record kind.
    Input is checked here before any store is touched; the stores only ever see
    trimmed, typed values.
    """

    def __init__(self, surveys: CollectionStore[SurveyRecord], issues: CollectionStore[IssueRecord]):
        self.surveys = surveys
        self.issues = issues

    @classmethod
    def from_paths(cls, surveys_path: str, issues_path: str) -> "WaterDataService":
        svc = cls(
            surveys=CollectionStore(SurveyRecord, surveys_path, label="surveys"),
            issues=CollectionStore(IssueRecord, issues_path, label="issues"),
        )
        # each store recovers on its own, so a broken surveys file never blocks issues
        svc.surveys.initialize()
        svc.issues.initialize()
        return svc

    @classmethod
    def from_settings(cls) -> "WaterDataService":
        return cls.from_paths(settings.surveys_path, settings.issues_path)

    # ---------- Surveys ----------
    def submit_survey(self, name: Any, usage: Any, timestamp: Any = None) -> SurveyRecord:
        clean_name = _text(name, "name")
        if clean_name is None or _is_blank(usage):
            raise MissingFieldError("Name and usage required")
        liters = parse_int(usage)
        if liters is None:
            raise InvalidFieldError("usage must be an integer")
        return self.surveys.create(
            name=clean_name,
            usage=liters,
            timestamp=_timestamp(timestamp),
        )

    def delete_survey(self, survey_id: Any) -> SurveyRecord:
        return self.surveys.delete_by_id(parse_int(survey_id))

    # ---------- Issues ----------
    def submit_issue(self, location: Any, problem: Any, timestamp: Any = None) -> IssueRecord:
        clean_location = _text(location, "location")
        clean_problem = _text(problem, "problem")
        if clean_location is None or clean_problem is None:
            raise MissingFieldError("Location and problem required")
        return self.issues.create(
            location=clean_location,
            problem=clean_problem,
            timestamp=_timestamp(timestamp),
        )

    def delete_issue(self, issue_id: Any) -> IssueRecord:
        return self.issues.delete_by_id(parse_int(issue_id))

    # ---------- Listing ----------
    def list_all_data(self) -> DataSnapshot:
        surveys = self.surveys.list_all()
        issues = self.issues.list_all()
        return DataSnapshot(
            surveys=surveys,
            issues=issues,
            total_surveys=len(surveys),
            total_issues=len(issues),
            timestamp=locale_timestamp(),
        )
