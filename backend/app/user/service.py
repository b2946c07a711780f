from sqlmodel import Session, select

from ..models.Car import Car
from ..models.User import User

def get_selling_cars(session: Session, user: User) -> list[Car]:
    return session.exec(select(Car).where(Car.user_id == user.id)).all()
