# src/blog_api/api/v1/endpoints/quotes.py
"""Quote endpoints for the Blog API."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from blog_api.api.v1.dependencies import AdminLevelOneDep, SessionDep
from blog_api.models import Quote
from blog_api.schemas.quote import QuoteCreate, QuoteResponse, QuoteUpdate
from blog_api.services.quote_service import QuoteService

router = APIRouter(prefix="/quote", tags=["quotes"])


def get_quote_service(db: SessionDep) -> QuoteService:
    return QuoteService(db)


QuoteServiceDep = Annotated[QuoteService, Depends(get_quote_service)]


@router.get("/random-quote", response_model=QuoteResponse)
async def get_random_quote(quotes: QuoteServiceDep) -> Quote:
    """Return one quote picked uniformly at random."""
    return quotes.random_quote()


@router.get("/all-quotes", response_model=list[QuoteResponse])
async def list_quotes(quotes: QuoteServiceDep) -> list[Quote]:
    return list(quotes.list_quotes())


@router.post("/new-quote", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(payload: QuoteCreate, admin: AdminLevelOneDep, quotes: QuoteServiceDep) -> Quote:
    return quotes.create_quote(payload)


@router.patch("/update-quote/{quote_id}", response_model=QuoteResponse)
async def update_quote(
    quote_id: int,
    payload: QuoteUpdate,
    admin: AdminLevelOneDep,
    quotes: QuoteServiceDep,
) -> Quote:
    return quotes.update_quote(quote_id, payload)


@router.delete("/delete-quote/{quote_id}", response_model=QuoteResponse)
async def delete_quote(quote_id: int, admin: AdminLevelOneDep, quotes: QuoteServiceDep) -> Quote:
    """Delete a quote and return what was removed."""
    return quotes.delete_quote(quote_id)
