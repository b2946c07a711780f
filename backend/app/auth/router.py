import logging

from fastapi import APIRouter, Depends

from ..core.errors import Unauthenticated
from ..models.Token import LogoutRequest
from .revocation import RevocationList, RevocationOutcome
from .service import get_revocation_list

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/logout")
def logout(
    body: LogoutRequest,
    revocations: RevocationList = Depends(get_revocation_list),
):
    """
    Invalidate the token given in the request body.
    """
    outcome = revocations.revoke(body.token)

    if outcome is RevocationOutcome.INVALID_TOKEN:
        logger.info("Logout rejected: invalid token")
        raise Unauthenticated("Invalid token.", body_key="error")
    if outcome is RevocationOutcome.ALREADY_REVOKED:
        logger.info("Logout rejected: token already invalidated")
        raise Unauthenticated("Token has already been invalidated.", body_key="error")

    logger.info("Logout successful")
    return {"message": "Logout successful."}
