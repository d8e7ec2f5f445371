"""Quote service."""
from __future__ import annotations

import random
from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from blog_api.models import Quote
from blog_api.schemas.quote import QuoteCreate, QuoteUpdate

from .errors import NotFoundError


class QuoteService:
    """CRUD for quotes plus random selection."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def random_quote(self) -> Quote:
        """Return a uniformly chosen quote.

        Raises:
            NotFoundError: If there are no quotes yet.
        """
        total = self.db.query(func.count(Quote.id)).scalar() or 0
        if total == 0:
            raise NotFoundError("Quote not found")
        quote = (
            self.db.query(Quote)
            .order_by(Quote.id)
            .offset(random.randrange(total))
            .first()
        )
        if quote is None:  # pragma: no cover - row deleted between queries
            raise NotFoundError("Quote not found")
        return quote

    def list_quotes(self) -> Sequence[Quote]:
        return self.db.query(Quote).order_by(Quote.id).all()

    def get_quote(self, quote_id: int) -> Quote:
        quote = self.db.get(Quote, quote_id)
        if quote is None:
            raise NotFoundError("Quote not found")
        return quote

    def create_quote(self, data: QuoteCreate) -> Quote:
        quote = Quote(author=data.author, text=data.text)
        self.db.add(quote)
        self.db.commit()
        self.db.refresh(quote)
        return quote

    def update_quote(self, quote_id: int, data: QuoteUpdate) -> Quote:
        quote = self.get_quote(quote_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(quote, key, value)
        self.db.commit()
        self.db.refresh(quote)
        return quote

    def delete_quote(self, quote_id: int) -> Quote:
        """Delete a quote and return the removed instance."""
        quote = self.get_quote(quote_id)
        self.db.delete(quote)
        self.db.commit()
        return quote
