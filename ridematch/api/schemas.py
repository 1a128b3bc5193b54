"""
API request/response schemas. Pydantic only in api layer.
Wire names are camelCase (aliases); Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class DriverSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    seats: int = Field(..., ge=0, description="Seats excluding the driver")
    is_parent: bool = Field(False, alias="isParent")


class AssignRidesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    present_kids: list[str] = Field(..., alias="presentKids")
    drivers: list[DriverSchema]
    # Extra area -> kids entries added by the caller; merged after the persisted file.
    client_areas: dict[str, list[str]] = Field(default_factory=dict, alias="clientAreas")


class AssignRidesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ride_assignments: dict[str, list[str]] = Field(..., alias="rideAssignments")
    unassigned_people: list[str] = Field(..., alias="unassignedPeople")


class AreasResponse(BaseModel):
    areas: dict[str, list[str]]
    kids: list[str]
