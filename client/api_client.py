from __future__ import annotations
from typing import Any, Dict, Optional

import requests

from backend.core.utils import locale_timestamp
from client.config import client_settings

class WaterApiClient:
    """
    What the survey page does, minus the page: fill a form, post it, refresh the lists.
    Every call raises requests.HTTPError on a non-2xx answer.
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or client_settings.api_url).rstrip("/")
        self.timeout = timeout_seconds or client_settings.timeout_seconds
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        r = self.session.request(method, self.base_url + path, json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/")

    def submit_survey(self, name: str, usage: Any) -> Dict[str, Any]:
        if not name or usage in (None, ""):
            raise ValueError("Please fill all fields")
        try:
            liters = int(usage)
        except (TypeError, ValueError):
            raise ValueError(f"Usage must be a whole number of liters, got {usage!r}")
        payload = {
            "name": name,
            "usage": liters,
            "timestamp": locale_timestamp(),
        }
        return self._request("POST", "/survey", payload)

    def delete_survey(self, survey_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/survey/{survey_id}")

    def report_issue(self, location: str, problem: str) -> Dict[str, Any]:
        if not location or not problem:
            raise ValueError("Please fill all fields")
        payload = {
            "location": location,
            "problem": problem,
            "timestamp": locale_timestamp(),
        }
        return self._request("POST", "/issue", payload)

    def delete_issue(self, issue_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/issue/{issue_id}")

    def fetch_all_data(self) -> Dict[str, Any]:
        return self._request("GET", "/data")
