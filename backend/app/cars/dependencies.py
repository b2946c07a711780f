import logging

from ..core.errors import Forbidden
from ..models.Base import canonical_id
from ..models.Car import Car
from ..models.Token import Identity

logger = logging.getLogger(__name__)


def is_owner(identity: Identity, car: Car) -> bool:
    return canonical_id(identity.user_id) == canonical_id(car.user_id)


def check_ownership(identity: Identity, car: Car) -> None:
    """
    Only the user who listed a car may mutate it. Callers must have already
    confirmed the car exists.
    """
    if not is_owner(identity, car):
        logger.warning(f"User {identity.user_id} denied access to car {car.id}")
        raise Forbidden("Unauthorized")
