import logging

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..auth.service import authenticate_user, get_current_identity, get_token_service
from ..auth.tokens import TokenService
from ..core.database import get_session
from ..core.errors import Unauthenticated
from ..models.Car import CarResponse, CarSummary, FavoriteCreate, FavoriteResponse
from ..models.Token import Identity
from ..models.User import AuthResponse, LoginRequest, UserRegister, UserResponse
from .service import (
    add_favorite,
    get_all_users,
    get_user_or_404,
    list_favorite_cars,
    register_user,
    remove_favorite,
    user_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=list[UserResponse])
def read_users(session: Session = Depends(get_session)):
    """
    List all users.
    """
    return get_all_users(session)

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    session: Session = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Create an account and return it together with a session token.
    """
    user = register_user(session, user_data)
    return AuthResponse(user=user_response(session, user), token=tokens.issue(user.id))

@router.post("/login", response_model=AuthResponse)
def login(
    login_data: LoginRequest,
    session: Session = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Login with email and password to get a session token.
    """
    user = authenticate_user(session, login_data.email, login_data.password)
    if not user:
        logger.info("Login failed: invalid credentials")
        raise Unauthenticated("Invalid credentials")

    logger.info(f"User {user.id} logged in")
    return AuthResponse(user=user_response(session, user), token=tokens.issue(user.id))

@router.post("/favorites", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
def create_favorite(
    favorite: FavoriteCreate,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    user = get_user_or_404(session, identity.user_id)
    car = add_favorite(session, user, favorite.car_id)
    return FavoriteResponse(
        message="Car added to favorites",
        car=CarSummary(id=car.id, make=car.make, model=car.model, description=car.description),
    )

@router.get("/favoriteCars", response_model=list[CarResponse])
def read_favorite_cars(
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    user = get_user_or_404(session, identity.user_id)
    return [CarResponse.from_car(car) for car in list_favorite_cars(session, user)]

@router.delete("/favorites/{car_id}")
def delete_favorite(
    car_id: str,
    identity: Identity = Depends(get_current_identity),
    session: Session = Depends(get_session),
):
    user = get_user_or_404(session, identity.user_id)
    remove_favorite(session, user, car_id)
    return {"message": "Car removed from favorites"}
