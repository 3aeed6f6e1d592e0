from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from backend.api.dependencies import get_service
from backend.models.records import SurveySubmission, SurveyResponse
from backend.services.errors import InvalidFieldError, RecordNotFoundError
from backend.services.water_data_service import WaterDataService

router = APIRouter()

@router.post("/survey", response_model=SurveyResponse)
def submit_survey(body: Optional[SurveySubmission] = None, svc: WaterDataService = Depends(get_service)):
    # an empty POST is a form with every field missing
    if body is None:
        body = SurveySubmission()
    try:
        survey = svc.submit_survey(body.name, body.usage, timestamp=body.timestamp)
    except InvalidFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SurveyResponse(message="Survey submitted successfully!", data=survey)

@router.delete("/survey/{survey_id}", response_model=SurveyResponse)
def delete_survey(survey_id: str, svc: WaterDataService = Depends(get_service)):
    try:
        survey = svc.delete_survey(survey_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SurveyResponse(message="Survey deleted successfully!", data=survey)
