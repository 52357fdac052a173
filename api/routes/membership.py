"""
Module 09D - Membership Route

Stateless Merkle membership check.
"""

from fastapi import APIRouter

from core.crypto.hashing import hash_text, to_hex
from core.merkle.commitment import verify_membership

from api.models.requests import MembershipRequest
from api.models.responses import MembershipResponse


router = APIRouter(tags=["verification"])


@router.post("/membership", response_model=MembershipResponse)
def check_membership(request: MembershipRequest) -> MembershipResponse:
    """Answer whether the claim text is committed under the root."""
    return MembershipResponse(
        ok=True,
        valid=verify_membership(request.claim_text, request.proof, request.root),
        leaf_hash=to_hex(hash_text(request.claim_text)),
    )
