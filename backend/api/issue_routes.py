from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from backend.api.dependencies import get_service
from backend.models.records import IssueSubmission, IssueResponse
from backend.services.errors import InvalidFieldError, RecordNotFoundError
from backend.services.water_data_service import WaterDataService

router = APIRouter()

@router.post("/issue", response_model=IssueResponse)
def report_issue(body: Optional[IssueSubmission] = None, svc: WaterDataService = Depends(get_service)):
    if body is None:
        body = IssueSubmission()
    try:
        issue = svc.submit_issue(body.location, body.problem, timestamp=body.timestamp)
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return IssueResponse(message="Issue reported successfully!", data=issue)

@router.delete("/issue/{issue_id}", response_model=IssueResponse)
def delete_issue(issue_id: str, svc: WaterDataService = Depends(get_service)):
    try:
        issue = svc.delete_issue(issue_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return IssueResponse(message="Issue deleted successfully!", data=issue)
