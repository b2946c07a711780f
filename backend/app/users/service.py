import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..auth.service import get_password_hash
from ..core.errors import Conflict, NotFound
from ..models.Base import canonical_id
from ..models.Car import Car, FavoriteCar
from ..models.User import User, UserRegister, UserResponse

logger = logging.getLogger(__name__)


def user_response(session: Session, user: User) -> UserResponse:
    """
    Builds the public view of a user, including the ids of the cars they
    sell and the cars they have favorited.
    """
    selling = session.exec(select(Car.id).where(Car.user_id == user.id)).all()
    favorites = session.exec(select(FavoriteCar.car_id).where(FavoriteCar.user_id == user.id)).all()
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone_number=user.phone_number,
        username=user.username,
        selling_cars=list(selling),
        favorite_cars=list(favorites),
    )


def get_all_users(session: Session) -> list[UserResponse]:
    users = session.exec(select(User)).all()
    return [user_response(session, user) for user in users]


def get_user_or_404(session: Session, user_id: str) -> User:
    user = session.get(User, canonical_id(user_id))
    if not user:
        raise NotFound("User not found")
    return user


def register_user(session: Session, user_data: UserRegister) -> User:
    statement = select(User).where(User.email == user_data.email)
    if session.exec(statement).first():
        raise Conflict("User already exists")

    new_user = User(
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        phone_number=user_data.phone_number,
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
    )
    session.add(new_user)
    try:
        session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        session.rollback()
        raise Conflict("User already exists")
    session.refresh(new_user)
    logger.info(f"Registered user {new_user.id}")
    return new_user


def add_favorite(session: Session, user: User, car_id: str) -> Car:
    car_id = canonical_id(car_id)
    if session.get(FavoriteCar, (user.id, car_id)):
        raise Conflict("Car already in favorites")

    car = session.get(Car, car_id)
    if not car:
        raise NotFound("Car not found")

    session.add(FavoriteCar(user_id=user.id, car_id=car.id))
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise Conflict("Car already in favorites")
    return car


def list_favorite_cars(session: Session, user: User) -> list[Car]:
    statement = (
        select(Car)
        .join(FavoriteCar, FavoriteCar.car_id == Car.id)
        .where(FavoriteCar.user_id == user.id)
    )
    return session.exec(statement).all()


def remove_favorite(session: Session, user: User, car_id: str) -> None:
    favorite = session.get(FavoriteCar, (user.id, canonical_id(car_id)))
    if not favorite:
        raise NotFound("Car not found in favorites")
    session.delete(favorite)
    session.commit()
