"""
Passerelle de persistance — SQLite/SQLAlchemy, un document par site.

save(document) → SaveResult(success, error?)   (écrasement, pas de fusion)
load()         → Document | None                (None si absent ou illisible)

Les erreurs du stockage sont journalisées et retournées, jamais propagées :
un échec de sauvegarde laisse le document en mémoire faire foi.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .config import DATABASE_URL, SITE_ID
from .core.schemas import Document, document_from_json, document_to_json
from .models import Base, SiteDocumentDB

log = logging.getLogger(__name__)


class SaveResult(BaseModel):
    success: bool
    error: Optional[str] = None


class DocumentStore:
    """
    Stockage du document du site.

    Usage:
        >>> store = DocumentStore("sqlite:///data/site.db")
        >>> store.init()
        >>> store.save(document).success
        True
        >>> store.load() == document
        True
    """

    def __init__(self, db_url: str = DATABASE_URL, site_id: str = SITE_ID):
        self.db_url = db_url
        self.site_id = site_id
        connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
        self.engine = create_engine(db_url, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init(self) -> None:
        """Crée le dossier SQLite si besoin + les tables."""
        database = self.engine.url.database
        if self.engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def save(self, document: Document) -> SaveResult:
        try:
            payload = document_to_json(document)
            with self.session() as db:
                row = db.get(SiteDocumentDB, self.site_id)
                if row is None:
                    db.add(SiteDocumentDB(site_id=self.site_id, payload=payload))
                else:
                    row.payload = payload
                    row.updated_at = datetime.utcnow()
                db.commit()
        except (SQLAlchemyError, ValueError, TypeError) as e:
            log.warning("Sauvegarde du site %s impossible : %s", self.site_id, e)
            return SaveResult(success=False, error=str(e))
        log.info("Site %s sauvegardé — %d octets", self.site_id, len(payload))
        return SaveResult(success=True)

    def load(self) -> Optional[Document]:
        try:
            with self.session() as db:
                row = db.get(SiteDocumentDB, self.site_id)
                payload = row.payload if row is not None else None
        except SQLAlchemyError as e:
            log.warning("Lecture du site %s impossible : %s", self.site_id, e)
            return None
        if payload is None:
            return None
        try:
            return document_from_json(payload)
        except ValidationError as e:
            log.warning("Document du site %s illisible : %s", self.site_id, e)
            return None


# ── Store par défaut (config env) ──
_STORE: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    """Store partagé, créé et initialisé au premier appel (dépendance FastAPI)."""
    global _STORE
    if _STORE is None:
        _STORE = DocumentStore()
        _STORE.init()
    return _STORE
