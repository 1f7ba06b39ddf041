from fastapi import APIRouter, Depends, status

from core.context import ViewerContext
from core.response import success_response
from database.store import RowStore, get_store
from routers.auth import get_viewer_context
from schemas.property import PropertySearchRequestCreate
from services.listings import submit_search_request

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_search_request(
    form: PropertySearchRequestCreate,
    store: RowStore = Depends(get_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Ask the team to find a property; no account needed."""
    message = submit_search_request(store, ctx, form)
    return success_response(message=message)
