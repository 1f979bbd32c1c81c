"""Pydantic schemas for the user organization endpoints."""

from pydantic import BaseModel, ConfigDict


class OrganizationRecord(BaseModel):
    """An organization as returned by the organization management service."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str


class OrganizationResponse(BaseModel):
    id: str
    name: str
    ref: str


class UserOrganizationsResponse(BaseModel):
    organizations: list[OrganizationResponse]
