"""Slot endpoints - filtered catalog listing, wire document and statistics."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from lighthouse.config import settings
from lighthouse.core.filters import SlotFilter, UnknownFilterError, build_filter
from lighthouse.db.database import get_db
from lighthouse.schemas.slot import SlotStatsResponse, SlotSummary
from lighthouse.services.slot_service import slot_service
from lighthouse.services.slot_stats_service import slot_stats_service
from lighthouse.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter()

PAGING_PARAMS = {"limit", "offset"}


def _filters_from_query(request: Request) -> list[SlotFilter]:
    """Turn query params into filters, rejecting any we don't know."""
    filters = []
    for name in request.query_params.keys():
        if name in PAGING_PARAMS:
            continue
        values = request.query_params.getlist(name)
        try:
            if name == "label":
                filters.append(build_filter(name, values))
            else:
                filters.extend(build_filter(name, value) for value in values)
        except UnknownFilterError as e:
            logger.info(f"Rejected slot filter {name}={values}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
    return filters


@router.get("/", response_model=list[SlotSummary])
async def list_slots(
    request: Request,
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List slots matching every filter given as a query param (see FILTER_BUILDERS)."""
    filters = _filters_from_query(request)
    slots = await slot_service.find_slots(db, filters, limit=limit, offset=offset)
    return [SlotSummary.model_validate(slot) for slot in slots]


@router.get("/{slot_id}")
async def get_slot(slot_id: int, viewer_id: int | None = None, db: AsyncSession = Depends(get_db)):
    """The slot's wire document, with the viewer's own stats when given."""
    slot = await slot_service.get_slot(db, slot_id)
    if slot is None:
        raise HTTPException(status_code=404, detail="Slot not found")
    body = await slot_service.render_slot(db, slot, viewer_id=viewer_id)
    return Response(content=body, media_type="application/xml")


@router.get("/{slot_id}/stats", response_model=SlotStatsResponse)
async def get_slot_stats(slot_id: int, db: AsyncSession = Depends(get_db)):
    """Derived statistics; unknown ids report empty stats rather than 404."""
    stats = await slot_stats_service.get_stats(db, slot_id)
    return SlotStatsResponse(
        slot_id=slot_id,
        heart_count=stats.heart_count,
        thumbs_up=stats.thumbs_up,
        thumbs_down=stats.thumbs_down,
        average_rating=stats.average_rating,
    )
