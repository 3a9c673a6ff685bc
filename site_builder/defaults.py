"""
Document initial — utilisé quand aucun document n'est encore stocké.
Une page d'accueil unique, remplie de blocs de démonstration.
"""
from .core.schemas import Document, document_from_dict

DEFAULT_SITE = {
    "title": "Mon école",
    "font": "sans",
    "primaryColor": "#1e40af",
    "secondaryColor": "#fbbf24",
    "pages": [
        {
            "id": "home",
            "name": "Accueil",
            "slug": "accueil",
            "sections": [
                {
                    "id": "ticker-1",
                    "type": "ticker",
                    "data": {
                        "label": "INFOS",
                        "text": "Les inscriptions en première année sont ouvertes. Contactez le secrétariat.",
                        "direction": "left",
                        "speed": 20,
                    },
                },
                {
                    "id": "hero-1",
                    "type": "hero",
                    "data": {
                        "title": "MON ÉCOLE",
                        "subtitle": "Une éducation de qualité pour chaque élève",
                        "bgImage": "https://images.unsplash.com/photo-1577896334698-70c858c14172?q=80&w=2071&auto=format&fit=crop",
                        "fontSize": "md",
                        "overlayOpacity": 0.8,
                    },
                },
                {
                    "id": "news-feed",
                    "type": "news",
                    "data": {
                        "title": "ACTUALITÉS",
                        "items": [
                            {"id": "1", "title": "Journée de nettoyage", "date": "2024-03-25", "tag": "VIE SCOLAIRE",
                             "content": "Enseignants et parents se retrouvent samedi matin."},
                            {"id": "2", "title": "Rencontres sportives", "date": "2024-04-10", "tag": "SPORT",
                             "content": "Les entraînements commencent la semaine prochaine."},
                        ],
                    },
                },
                {
                    "id": "divider-1",
                    "type": "divider",
                    "data": {"style": "solid", "color": "#e5e7eb", "thickness": 2},
                },
                {
                    "id": "history",
                    "type": "content",
                    "data": {
                        "title": "NOTRE HISTOIRE",
                        "body": "Fondée dans les années 1950, l'école accueillait à l'origine 50 élèves.",
                        "alignment": "center",
                        "fontSize": "md",
                    },
                },
                {
                    "id": "contact-main",
                    "type": "contact",
                    "data": {
                        "title": "Nous contacter",
                        "email": "contact@ecole.example.org",
                        "phone": "+33 1 23 45 67 89",
                        "address": "1 rue de l'École, 75000 Paris",
                        "mapUrl": "",
                    },
                },
                {
                    "id": "footer-main",
                    "type": "footer",
                    "data": {"copyright": "© 2024 MON ÉCOLE. TOUS DROITS RÉSERVÉS."},
                },
            ],
            "subPages": [],
        }
    ],
}


def default_document() -> Document:
    return document_from_dict(DEFAULT_SITE)
