from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def health():
    return {"message": "Clean Water & Sanitation Backend Running"}
