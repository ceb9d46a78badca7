"""
Data models for the frames SDK.
"""
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field


class TrustedData(BaseModel):
    """Signed, hex-encoded frame action message"""
    message_bytes: str = Field(..., alias="messageBytes")

    class Config:
        populate_by_name = True


class FrameActionPayload(BaseModel):
    """Body POSTed by a client when a frame button is pressed"""
    trusted_data: TrustedData = Field(..., alias="trustedData")
    # Client-reported copy of the action, never trusted
    untrusted_data: Optional[Dict[str, Any]] = Field(None, alias="untrustedData")

    class Config:
        populate_by_name = True


class CastId(BaseModel):
    """Identifies a cast by its author FID and 0x-prefixed hash"""
    fid: int
    hash: str


class UserData(BaseModel):
    """Profile data published by a user"""
    profile_image: Optional[str] = Field(None, alias="profileImage")
    display_name: Optional[str] = Field(None, alias="displayName")
    username: Optional[str] = None
    bio: Optional[str] = None

    class Config:
        populate_by_name = True


class FrameActionDataParsed(BaseModel):
    """Fields extracted from the trusted frame action message"""
    button_index: int = Field(..., alias="buttonIndex")
    input_text: Optional[str] = Field(None, alias="inputText")
    requester_fid: int = Field(..., alias="requesterFid")
    cast_id: Optional[CastId] = Field(None, alias="castId")

    class Config:
        populate_by_name = True


class FrameActionHubContext(BaseModel):
    """
    Facts about the requester fetched from a hub.

    None of the relationship or profile fields should be trusted unless
    is_valid is True.
    """
    is_valid: bool = Field(..., alias="isValid")
    requester_follows_caster: bool = Field(False, alias="requesterFollowsCaster")
    caster_follows_requester: bool = Field(False, alias="casterFollowsRequester")
    liked_cast: bool = Field(False, alias="likedCast")
    recasted_cast: bool = Field(False, alias="recastedCast")
    requester_verified_addresses: List[str] = Field(
        default_factory=list, alias="requesterVerifiedAddresses"
    )
    requester_user_data: Optional[UserData] = Field(None, alias="requesterUserData")

    class Config:
        populate_by_name = True


class FrameActionDataParsedAndHubContext(FrameActionDataParsed, FrameActionHubContext):
    """Parsed frame action merged with its hub context"""
    pass
