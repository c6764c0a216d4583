"""Houses router module."""

from typing import Dict, List

from fastapi import APIRouter, HTTPException

from ...models import DEFAULT_HOUSES, get_house_by_id

router = APIRouter(tags=["houses"])

@router.get("/houses", response_model=List[Dict])
def list_houses():
    """List the houses events can be scoped to."""
    return [house.to_dict() for house in DEFAULT_HOUSES]

@router.get("/houses/{house_id}", response_model=Dict)
def get_house(house_id: str):
    """Get a single house by its code."""
    house = get_house_by_id(house_id)
    if house is None:
        raise HTTPException(status_code=404, detail="House not found")
    return house.to_dict()
