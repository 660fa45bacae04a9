import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api.routes import build_router
from .core.config import Settings, settings as default_settings
from .core.database import Base, build_engine, build_session_factory
from .core.exceptions import DiscountServiceError
from .services.discount_client import DiscountClient
from .services.flight_service import FlightService
from .services.flight_store import FlightStore

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, discount_client: Optional[DiscountClient] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    engine = build_engine(settings.DATABASE_URL)
    store = FlightStore(build_session_factory(engine))
    if discount_client is None:
        discount_client = DiscountClient(settings.DISCOUNT_SERVICE_URL, timeout=settings.DISCOUNT_SERVICE_TIMEOUT)
    flight_service = FlightService(store, discount_client, settings.NEGATIVE_PRICE_POLICY)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create tables
        Base.metadata.create_all(bind=engine)
        yield
        discount_client.close()
        engine.dispose()

    app = FastAPI(
        title="Flight Service API",
        description="API for creating and searching flights with discount codes",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(DiscountServiceError)
    async def discount_error_handler(request: Request, exc: DiscountServiceError):
        logger.error(f"Discount lookup failed for {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage error for {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})

    app.include_router(build_router(store, flight_service), prefix="/flightapi", tags=["flights"])

    @app.get("/health")
    def health_check():
        try:
            store.ping()
        except SQLAlchemyError as e:
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "service": "flight-service",
                    "database": "disconnected",
                    "error": str(e),
                },
            )
        return {"status": "healthy", "service": "flight-service", "database": "connected"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
