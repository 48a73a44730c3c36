"""Main module for the stock data aggregation service."""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stock_data_agg.db.sessions import engine, init_db
from stock_data_agg.routers import stocks_router, users_router
from stock_data_agg.services import create_stock_provider, create_stock_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Create the provider, service and tables at startup; close the provider on shutdown."""
    provider = create_stock_provider()
    fastapi_app.state.stock_service = create_stock_service(provider)
    fastapi_app.state.db_engine = engine
    init_db(engine)
    logger.info("Using %s stock data provider", provider.name)

    yield

    # Close provider resources (httpx client)
    try:
        await provider.close()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "http://localhost:8081")
    return [o.strip() for o in raw.split(",") if o.strip()]


app = FastAPI(
    title="Stock Data Aggregator",
    description="Quotes, company overviews, monthly history and summaries from upstream stock APIs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,
)

# Include routers
app.include_router(stocks_router)
app.include_router(users_router)


@app.get("/")
def health():
    """Return health check status."""
    return {"status": "ok"}


def run():
    """Run the server (uvicorn). Use for the `stock-data-agg` script."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "stock_data_agg.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
