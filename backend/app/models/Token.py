from pydantic import BaseModel, Field

from .Base import CamelModel

class TokenPayload(BaseModel):
    # Claims are read by their wire names only
    user_id: str = Field(alias="userId") # User ID
    iat: int # Issued at time
    exp: int # Expiration time
    jti: str | None = None # Unique token id

class Identity(CamelModel):
    """
    Authenticated principal attached to a request.
    """
    user_id: str

class LogoutRequest(CamelModel):
    token: str | None = None
