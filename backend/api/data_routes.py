from fastapi import APIRouter, Depends

from backend.api.dependencies import get_service
from backend.models.snapshot import DataSnapshot
from backend.services.water_data_service import WaterDataService

router = APIRouter()

@router.get("/data", response_model=DataSnapshot)
def view_all_data(svc: WaterDataService = Depends(get_service)):
    return svc.list_all_data()
