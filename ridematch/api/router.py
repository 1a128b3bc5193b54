"""
API router. Calls application only. No business logic.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ridematch.api.schemas import AreasResponse, AssignRidesRequest, AssignRidesResponse
from ridematch.application.use_cases.assign_rides import (
    assign_rides,
    default_data_source,
    load_area_roster,
)
from ridematch.domain.models import Driver
from ridematch.infrastructure.data_source import DataSource, DataSourceError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_data_source() -> DataSource:
    return default_data_source()


@router.get("/areas", response_model=AreasResponse)
def get_areas(source: DataSource = Depends(get_data_source)) -> AreasResponse:
    """
    GET /areas
    Persisted area membership and the sorted list of all kids (roster to pick from).
    """
    try:
        areas, kids = load_area_roster(source)
    except DataSourceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return AreasResponse(areas=areas, kids=kids)


@router.post("/rides/assign", response_model=AssignRidesResponse)
def post_assign_rides(
    request: AssignRidesRequest,
    source: DataSource = Depends(get_data_source),
) -> AssignRidesResponse:
    """
    POST /rides/assign
    Accepts present kids, drivers (in priority order) and optional client areas.
    Returns rideAssignments + unassignedPeople.
    """
    drivers = [Driver(name=d.name, seats=d.seats, is_parent=d.is_parent) for d in request.drivers]
    try:
        result = assign_rides(
            request.present_kids,
            drivers,
            client_areas=request.client_areas,
            source=source,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataSourceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.exception("Ride assignment failed")
        raise HTTPException(status_code=500, detail=str(e))
    return AssignRidesResponse(
        ride_assignments=result.ride_assignments,
        unassigned_people=result.unassigned_people,
    )
