from pydantic import EmailStr, Field as PydanticField, field_validator, validate_email
from sqlmodel import Field, SQLModel

from .Base import CamelModel, new_id

# ==========================================
# SQLModel (Database Entity)
# ==========================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True)
    first_name: str | None = Field(default=None, nullable=True)
    last_name: str | None = Field(default=None, nullable=True)
    email: str = Field(unique=True, index=True, nullable=False)
    phone_number: str | None = Field(default=None, nullable=True)
    username: str | None = Field(default=None, nullable=True)
    hashed_password: str = Field(nullable=False)

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on registration
class UserRegister(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr
    phone_number: str | None = None
    username: str | None = None
    password: str = PydanticField(min_length=1)

    @field_validator("phone_number", mode="before")
    @classmethod
    def phone_as_text(cls, value):
        # Clients may send the number as a JSON number
        if isinstance(value, int):
            return str(value)
        return value

# Properties to receive via API on login
class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def registered_form(cls, value):
        # Stored addresses are EmailStr-normalized (lower-cased domain)
        try:
            return validate_email(value)[1]
        except ValueError:
            # Not an address, so it matches no account
            return value

# Properties to return via API (never the password)
class UserResponse(CamelModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str
    phone_number: str | None = None
    username: str | None = None
    selling_cars: list[str] = []
    favorite_cars: list[str] = []

class AuthResponse(CamelModel):
    user: UserResponse
    token: str
