"""Inventory API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from gilded_rose.api.schemas import (
    ErrorResponse,
    ItemSchema,
    SimulateRequest,
    SimulateResponse,
)
from gilded_rose.core.item.models import Item
from gilded_rose.core.logging import get_logger
from gilded_rose.services.inventory_service import InventoryService, ItemSnapshot

logger = get_logger(__name__)

router = APIRouter(prefix="/inventory", tags=["inventory"])


def get_inventory_service(request: Request) -> InventoryService:
    """InventoryService instance (dependency injection)"""
    service: InventoryService = request.app.state.inventory_service
    return service


def _build_item_schema(snapshot: ItemSnapshot) -> ItemSchema:
    return ItemSchema(
        name=snapshot.name,
        sell_in=snapshot.sell_in,
        quality=snapshot.quality,
        category=snapshot.category,
        display=snapshot.display,
    )


@router.get("/seed", response_model=list[ItemSchema])
def get_seed_items(
    service: InventoryService = Depends(get_inventory_service),
) -> list[ItemSchema]:
    """Opening stock from the seed catalogue."""
    items: list[Item] = service.load_seed()
    return [_build_item_schema(ItemSnapshot.of(item)) for item in items]


@router.post(
    "/simulate",
    response_model=SimulateResponse,
    responses={400: {"model": ErrorResponse}},
)
def simulate(
    request: SimulateRequest,
    service: InventoryService = Depends(get_inventory_service),
) -> SimulateResponse:
    """
    Age the posted items by `days` days.

    Items are not validated; an out-of-range quality is clamped on the first day.
    """
    triples = [(i.name, i.sell_in, i.quality) for i in request.items]
    try:
        result = service.simulate(
            triples, request.days, include_history=request.include_history
        )
    except ValueError as e:
        logger.warning("Simulation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    history = None
    if request.include_history:
        history = [[_build_item_schema(s) for s in day] for day in result.history]

    return SimulateResponse(
        days=result.days,
        items=[_build_item_schema(s) for s in result.items],
        history=history,
    )
