import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from ..core.exceptions import GeocodingNotConfiguredError
from ..schemas import AddLocationRequest, ApiResponse, LAND_TYPES, LandArea
from ..services.land_service import LandDataService

logger = logging.getLogger(__name__)

router = APIRouter()

def service_dep(request: Request) -> LandDataService:
    # Built once in create_app(); the generated-area cache lives on it
    return request.app.state.land_service

@router.get("", response_model=ApiResponse[List[LandArea]], response_model_exclude_none=True)
@router.get("/", response_model=ApiResponse[List[LandArea]], response_model_exclude_none=True, include_in_schema=False)
async def list_land_areas(svc: LandDataService = Depends(service_dep)):
    areas = await svc.get_all()
    return {"success": True, "data": areas, "message": "Land areas retrieved successfully"}

@router.get("/type/{type}", response_model=ApiResponse[List[LandArea]], response_model_exclude_none=True)
async def land_areas_by_type(type: str, svc: LandDataService = Depends(service_dep)):
    if type not in LAND_TYPES:
        raise HTTPException(status_code=400, detail="Invalid land area type")
    areas = await svc.get_by_type(type)
    return {"success": True, "data": areas, "message": f"Land areas of type '{type}' retrieved successfully"}

# :path so an encoded "/" in the query still reaches this route
@router.get("/search/{query:path}", response_model=ApiResponse[List[LandArea]], response_model_exclude_none=True)
async def search_land_areas(query: str, svc: LandDataService = Depends(service_dep)):
    if not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    areas = await svc.search(query)
    return {"success": True, "data": areas, "message": f"Search results for '{query}'"}

@router.post(
    "/add-location", status_code=201,
    response_model=ApiResponse[LandArea], response_model_exclude_none=True,
)
async def add_land_area_by_location(body: AddLocationRequest, svc: LandDataService = Depends(service_dep)):
    try:
        area = await svc.add_by_location(body.name, body.address, body.type, body.estimated_price)
    except GeocodingNotConfiguredError as e:
        logger.error(f"add-location rejected: {e}")
        raise HTTPException(status_code=500, detail="Location lookup is not available")
    if area is None:
        raise HTTPException(status_code=400, detail="Could not resolve coordinates for the given address")
    return {"success": True, "data": area, "message": f"Land area '{area.name}' added successfully"}

@router.get("/{area_id}", response_model=ApiResponse[LandArea], response_model_exclude_none=True)
async def get_land_area(area_id: str, svc: LandDataService = Depends(service_dep)):
    area = await svc.get_by_id(area_id)
    if area is None:
        raise HTTPException(status_code=404, detail="Land area not found")
    return {"success": True, "data": area, "message": "Land area retrieved successfully"}
