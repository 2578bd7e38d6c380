from fastapi import APIRouter, Request
from .schemas import SeedOut
from .service import seed_demo

router = APIRouter(prefix="/seed", tags=["seed"])

@router.post("/demo", response_model=SeedOut)
def post_seed_demo(request: Request):
    rid = getattr(getattr(request, "state", None), "request_id", None)
    return seed_demo(request_id=rid)
