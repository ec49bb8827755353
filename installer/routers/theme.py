"""
FastAPI router for theme fragments.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from installer.dependencies import get_request_language, get_table_sort
from installer.services.theme import TableSort

router = APIRouter(prefix="/theme", tags=["Theme"])


@router.get("/tablesort-indicator", response_class=HTMLResponse)
async def tablesort_indicator(
    table_sort: Annotated[TableSort, Depends(get_table_sort)],
    language: Annotated[str, Depends(get_request_language)],
    style: str = Query(default="asc"),
):
    """Render the sort direction icon for the given style."""
    return HTMLResponse(content=str(table_sort.render_indicator(style, language)))
