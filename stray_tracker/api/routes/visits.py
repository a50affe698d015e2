"""Visit routes. Visits can be recorded and listed, never edited."""

from fastapi import APIRouter, Body, Depends

from stray_tracker.api.deps import get_current_account, get_services
from stray_tracker.models.visit import VisitCreate
from stray_tracker.services import Services

router = APIRouter(prefix="/visits", tags=["visits"])


@router.post("/", status_code=201)
async def record_visit(
    payload: VisitCreate = Body(...),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    visit_id = services.visits.add_visit(payload, recorded_by=account.id)
    return {"id": visit_id, "animalId": payload.animal_id}
