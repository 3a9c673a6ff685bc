"""
site_builder — FastAPI app
Démarrer : uvicorn site_builder.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import LOG_LEVEL
from .routes import editor, site

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="site_builder — Éditeur de site", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(site.router)
app.include_router(editor.router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "site_builder", "version": "1.0.0"}
