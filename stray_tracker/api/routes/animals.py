"""Animal routes: list/search, CRUD, dashboard summary and photos."""

from fastapi import APIRouter, Body, Depends, File, HTTPException, Query, UploadFile

from stray_tracker.api.deps import get_current_account, get_services, require_role
from stray_tracker.models.animal import AnimalCreate, AnimalUpdate, Species
from stray_tracker.models.filters import AnimalFilter
from stray_tracker.services import Services
from stray_tracker.services.animal_store import AnimalListState

router = APIRouter(prefix="/animals", tags=["animals"])


def _list_state(services: Services, filter: AnimalFilter) -> AnimalListState:
    # One remote filter from the registry, the rest narrowed in memory
    state = AnimalListState(filter=filter)
    state.set_animals(services.animals.list_animals(filter))
    return state


@router.get("/")
async def list_animals(
    species: str = Query("all"),
    health_status: str = Query("all", alias="healthStatus"),
    search: str = Query(""),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    try:
        filter = AnimalFilter(species=species, health_status=health_status, search=search)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    state = _list_state(services, filter)
    return {"items": [a.to_document(mode="json") for a in state.filtered_animals()]}


@router.get("/summary")
async def animal_summary(
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    state = _list_state(services, AnimalFilter())
    summary = state.summary()
    return {
        **summary.to_document(mode="json"),
        "recent": [a.to_document(mode="json") for a in state.animals[:5]],
    }


@router.post("/new-form")
async def new_animal_form(
    species: Species = Query("cat"),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    """Pre-filled values for the add-animal form, including a fresh tag."""
    return services.animals.new_animal_form(species).to_document(mode="json")


@router.post("/", status_code=201)
async def create_animal(
    payload: AnimalCreate = Body(...),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    animal_id = services.animals.add_animal(payload, created_by=account.id)
    return {"id": animal_id}


@router.get("/{animal_id}")
async def get_animal(
    animal_id: str,
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    animal = services.animals.get_animal(animal_id)
    if animal is None:
        raise HTTPException(status_code=404, detail="Animal not found")
    return animal.to_document(mode="json")


@router.patch("/{animal_id}")
async def update_animal(
    animal_id: str,
    payload: AnimalUpdate = Body(...),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    services.animals.update_animal(animal_id, payload)
    return {"id": animal_id, "updated": sorted(payload.to_patch())}


@router.delete("/{animal_id}")
async def delete_animal(
    animal_id: str,
    services: Services = Depends(get_services),
    account=Depends(require_role(["admin", "staff"])),
):
    services.animals.delete_animal(animal_id)
    return {"message": "Animal deleted"}


@router.post("/{animal_id}/photo", status_code=201)
async def upload_photo(
    animal_id: str,
    file: UploadFile = File(...),
    store: bool = Query(False),
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    """Upload a photo. With ``store=true`` the URL is also saved on the animal."""
    data = await file.read()
    filename = file.filename or "photo"
    upload = (
        services.animals.attach_and_store_photo if store else services.animals.attach_photo
    )
    url = upload(animal_id, data, filename, file.content_type)
    return {"url": url, "stored": store}


@router.get("/{animal_id}/visits")
async def list_visits(
    animal_id: str,
    services: Services = Depends(get_services),
    account=Depends(get_current_account),
):
    visits = services.visits.get_visits_by_animal(animal_id)
    return {"items": [v.to_document(mode="json") for v in visits]}
