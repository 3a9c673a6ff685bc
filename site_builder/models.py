"""
ORM — stockage du document du site (SQLAlchemy).
Un enregistrement par site : payload JSON opaque, écrasé à chaque sauvegarde.
"""
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class SiteDocumentDB(Base):
    __tablename__ = "site_documents"
    site_id:    Mapped[str]      = mapped_column(sa.String, primary_key=True)
    payload:    Mapped[str]      = mapped_column(sa.Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
