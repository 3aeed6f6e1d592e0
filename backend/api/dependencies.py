from functools import lru_cache

from backend.services.water_data_service import WaterDataService

@lru_cache
def get_service() -> WaterDataService:
    """One service per process; both stores load their files on first use."""
    return WaterDataService.from_settings()
