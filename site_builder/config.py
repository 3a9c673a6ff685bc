"""Configuration — variables d'environnement (valeurs par défaut pour le dev local)."""
import os
from pathlib import Path

DATA_DIR = Path(os.getenv("DATA_DIR", str(Path(__file__).parent.parent / "data")))

DB_PATH      = os.getenv("DB_PATH", str(DATA_DIR / "site_builder.db"))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

# Identifiant fixe du document du site (un seul document, écrasé à chaque sauvegarde)
SITE_ID = os.getenv("SITE_ID", "main-site")

ADMIN_TOKEN = os.getenv("ADMIN_TOKEN", "changeme")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
