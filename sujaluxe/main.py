import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sujaluxe.config import settings
from sujaluxe.database import create_db_and_tables
from sujaluxe.middleware.request_log import RequestLogMiddleware
from sujaluxe.notifications import ConnectionRegistry
from sujaluxe.routes import (
    analytics,
    auctions,
    auth,
    campaigns,
    cart,
    customers,
    health,
    negotiations,
    notifications,
    orders,
    products,
    retailers,
    reviews,
    room_designs,
    ws,
)
from sujaluxe.services.errors import MarketplaceError
from sujaluxe.utils.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
    logger.info(f"SujaLuxe API started (env={settings.ENV})")
    yield
    logger.info("SujaLuxe API stopped")


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="SujaLuxe Marketplace API", lifespan=lifespan)
    app.state.connections = ConnectionRegistry()

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------- Error handlers --------

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # -------- Routers --------

    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])
    app.include_router(retailers.router, prefix="/api/retailers", tags=["Retailers"])
    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
    app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
    app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
    app.include_router(auctions.router, prefix="/api/auctions", tags=["Auctions"])
    app.include_router(negotiations.router, prefix="/api/negotiations", tags=["Negotiations"])
    app.include_router(reviews.router, prefix="/api/reviews", tags=["Reviews"])
    app.include_router(campaigns.router, prefix="/api/campaigns", tags=["Campaigns"])
    app.include_router(room_designs.router, prefix="/api/room-designs", tags=["Room Designs"])
    app.include_router(analytics.router, prefix="/api/analytics", tags=["Analytics"])
    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(ws.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sujaluxe.main:app", host="0.0.0.0", port=8000)
