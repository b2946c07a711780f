import logging
import re

from sqlmodel import Session, select

from ..core.errors import BadRequest, NotFound
from ..models.Base import canonical_id
from ..models.Car import Car, CarCreate, CarResponse, FavoriteCar
from ..models.Token import Identity

logger = logging.getLogger(__name__)


def get_all_cars(session: Session) -> list[Car]:
    return session.exec(select(Car)).all()


def get_car_or_404(session: Session, car_id: str) -> Car:
    car = session.get(Car, canonical_id(car_id))
    if not car:
        raise NotFound("Car not found")
    return car


def search_cars(session: Session, query: str) -> list[Car]:
    """
    Cars whose make or model matches ``query`` as a case-insensitive
    regular expression. An empty query matches everything.
    """
    try:
        pattern = re.compile(query, re.IGNORECASE)
    except re.error:
        raise BadRequest("Invalid search query")

    return [
        car for car in get_all_cars(session)
        if pattern.search(car.make or "") or pattern.search(car.model or "")
    ]


def create_car(session: Session, identity: Identity, car_data: CarCreate) -> Car:
    new_car = Car(**car_data.model_dump(), user_id=canonical_id(identity.user_id))
    session.add(new_car)
    session.commit()
    session.refresh(new_car)
    logger.info(f"User {new_car.user_id} listed car {new_car.id}")
    return new_car


def delete_car(session: Session, car: Car) -> CarResponse:
    """
    Deletes a car and drops it from every favorites list. Callers must have
    already run the ownership check. Returns the deleted car.
    """
    deleted = CarResponse.from_car(car)

    favorites = session.exec(select(FavoriteCar).where(FavoriteCar.car_id == car.id)).all()
    for favorite in favorites:
        session.delete(favorite)
    session.delete(car)
    session.commit()
    logger.info(f"User {deleted.user} removed car {deleted.id}")
    return deleted
