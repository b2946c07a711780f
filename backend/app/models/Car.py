from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from .Base import CamelModel, new_id
from .User import UserResponse

class Car(SQLModel, table=True):
    __tablename__ = "cars"

    id: str = Field(default_factory=new_id, primary_key=True)
    make: str | None = None
    model: str | None = None
    year: int | None = None
    price: float | None = None
    pictures: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    description: str | None = None
    # Owner; set at creation and never reassigned
    user_id: str = Field(foreign_key="users.id", index=True)

class FavoriteCar(SQLModel, table=True):
    __tablename__ = "favorite_cars"

    user_id: str = Field(foreign_key="users.id", primary_key=True)
    car_id: str = Field(foreign_key="cars.id", primary_key=True)

class CarCreate(CamelModel):
    make: str | None = None
    model: str | None = None
    year: int | None = None
    price: float | None = None
    pictures: list[str] = []
    description: str | None = None

class CarResponse(CamelModel):
    id: str
    make: str | None = None
    model: str | None = None
    year: int | None = None
    price: float | None = None
    pictures: list[str] = []
    description: str | None = None
    user: str

    @classmethod
    def from_car(cls, car: Car) -> "CarResponse":
        return cls(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price=car.price,
            pictures=list(car.pictures or []),
            description=car.description,
            user=car.user_id,
        )

class CarOwnerResponse(CamelModel):
    car: CarResponse
    user: UserResponse | None = None

class SellingCarsResponse(CamelModel):
    selling_cars: list[CarResponse]

class FavoriteCreate(CamelModel):
    car_id: str

class CarSummary(CamelModel):
    id: str
    make: str | None = None
    model: str | None = None
    description: str | None = None

class FavoriteResponse(CamelModel):
    message: str
    car: CarSummary
