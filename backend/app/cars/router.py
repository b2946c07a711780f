from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..auth.service import get_current_identity
from ..core.database import get_session
from ..models.Car import CarCreate, CarOwnerResponse, CarResponse
from ..models.Token import Identity
from ..users.service import get_user_or_404, user_response
from .dependencies import check_ownership, is_owner
from .service import create_car, delete_car, get_all_cars, get_car_or_404, search_cars

router = APIRouter(prefix="/cars", tags=["cars"])

@router.get("", response_model=list[CarResponse])
def read_cars(session: Session = Depends(get_session)):
    return [CarResponse.from_car(car) for car in get_all_cars(session)]

# Declared before /{car_id} so "search" is not taken as an id
@router.get("/search", response_model=list[CarResponse])
def search(query: str = "", session: Session = Depends(get_session)):
    """
    Search cars by make or model.
    """
    return [CarResponse.from_car(car) for car in search_cars(session, query)]

@router.get("/{car_id}", response_model=CarOwnerResponse, response_model_exclude_unset=True)
def read_car(
    car_id: str,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    """
    Get a car. The owner also receives their user record.
    """
    car = get_car_or_404(session, car_id)
    if is_owner(identity, car):
        owner = get_user_or_404(session, car.user_id)
        return CarOwnerResponse(car=CarResponse.from_car(car), user=user_response(session, owner))
    return CarOwnerResponse(car=CarResponse.from_car(car))

@router.post("", response_model=CarOwnerResponse, status_code=status.HTTP_201_CREATED)
def create_new_car(
    car_data: CarCreate,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    """
    List a car for sale, owned by the caller.
    """
    owner = get_user_or_404(session, identity.user_id)
    car = create_car(session, identity, car_data)
    return CarOwnerResponse(car=CarResponse.from_car(car), user=user_response(session, owner))

@router.delete("/{car_id}", response_model=CarOwnerResponse)
def remove_car(
    car_id: str,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    """
    Delete a car (owner only).
    """
    car = get_car_or_404(session, car_id)
    check_ownership(identity, car)
    owner = get_user_or_404(session, car.user_id)
    deleted = delete_car(session, car)
    return CarOwnerResponse(car=deleted, user=user_response(session, owner))
