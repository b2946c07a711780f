from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..auth.service import get_current_identity
from ..core.database import get_session
from ..models.Car import CarResponse, SellingCarsResponse
from ..models.Token import Identity
from ..models.User import UserResponse
from ..users.service import get_user_or_404, user_response
from .service import get_selling_cars

router = APIRouter(prefix="/user", tags=["user"])

@router.get("/profile", response_model=UserResponse)
def get_profile(
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    """
    Get the authenticated user's profile.
    """
    user = get_user_or_404(session, identity.user_id)
    return user_response(session, user)

@router.get("/selling-cars", response_model=SellingCarsResponse)
def read_selling_cars(
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    """
    List the cars the authenticated user is selling.
    """
    user = get_user_or_404(session, identity.user_id)
    cars = get_selling_cars(session, user)
    return SellingCarsResponse(selling_cars=[CarResponse.from_car(car) for car in cars])
