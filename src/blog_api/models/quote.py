# src/blog_api/models/quote.py
"""SQLAlchemy model for quotes."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.session import Base


class Quote(Base):
    """Attributed quotation shown on the site."""

    __tablename__ = "quote"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
