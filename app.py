"""
portfolio-api/app.py
Point d'entrée principal de l'API du portfolio
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import router as api_router, auth_router
from infrastructure.memory import MemoryStore
from logging_config import setup_logging, setup_colored_logging

# Initialiser la configuration
config = Config()

# Configurer le logging
if config.log_colored:
    logger = setup_colored_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )
else:
    logger = setup_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    # --- Startup ---
    store: MemoryStore = app.state.store
    logger.info(f"🚀 Démarrage de {app.state.config.app_name}")
    logger.info(f"📦 Store en mémoire: {store.stats()}")

    yield

    # --- Shutdown ---
    # Aucune persistance : tout le contenu du store est perdu ici
    logger.info(f"🛑 Arrêt de {app.state.config.app_name} ({store.stats()['projects']} projets en mémoire)")


def create_app(store: Optional[MemoryStore] = None, app_config: Optional[Config] = None) -> FastAPI:
    """
    Construit l'application avec son store.

    Un seul MemoryStore par application ; les tests en passent un neuf pour
    repartir d'un état vide.
    """
    app_config = app_config or config

    application = FastAPI(
        title=app_config.app_name,
        description="API du portfolio : projets, tags, likes et dashboard propriétaire",
        version=app_config.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    application.state.config = app_config
    application.state.store = store if store is not None else MemoryStore(
        default_tags=app_config.default_tags
    )

    # Configuration CORS (front marketing + dashboard)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Inclure les routes API
    application.include_router(api_router, prefix="/api")
    # Inclure les routes d'authentification
    application.include_router(auth_router, prefix="/api", tags=["Authentication"])

    @application.get("/", tags=["Root"])
    def root():
        """Page d'accueil de l'API"""
        return {
            "service": "portfolio-api",
            "version": app_config.version,
            "status": "operational",
            "documentation": "/docs"
        }

    @application.get("/health", tags=["System"])
    def health_check():
        """Endpoint de santé pour les orchestrateurs (Kubernetes, Docker, etc.)"""
        return {
            "status": "healthy",
            "service": "portfolio-api",
            "store": application.state.store.stats()
        }

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    uvicorn.run(
        "app:app",
        host=config.host,
        port=config.port,
        reload=True,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
