from fastapi import APIRouter, Depends

from core.context import ViewerContext
from core.response import success_response
from routers.auth import get_viewer_context
from services.categories import CASCAIS_LOCATIONS, catalog
from services.opening_hours import default_schedule, format_opening_hours, serialize_schedule

router = APIRouter()


@router.get("/categories")
def list_categories(ctx: ViewerContext = Depends(get_viewer_context)):
    """Categories and their subcategories, labelled in the viewer's language."""
    return success_response(data=catalog(ctx.is_pt))


@router.get("/locations")
def list_locations():
    return success_response(data=CASCAIS_LOCATIONS)


@router.get("/opening-hours/default")
def get_default_opening_hours(ctx: ViewerContext = Depends(get_viewer_context)):
    """Schedule a new profile starts from."""
    schedule = default_schedule()
    return success_response(data={
        "entries": serialize_schedule(schedule),
        "text": format_opening_hours(schedule, ctx.locale),
    })
