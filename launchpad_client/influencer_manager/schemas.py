"""Influencer manager schemas."""

from typing import Literal, TypedDict

from pydantic import BaseModel


class InfluencerManagerUser(TypedDict):
    id: str
    email: str
    name: str
    role: Literal["influencer_manager"]


class InfluencerManagerLoginResponse(TypedDict):
    token: str
    user: InfluencerManagerUser


class InfluencerManagerLoginInput(BaseModel):
    email: str
    password: str
