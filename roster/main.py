import logging

from fastapi import FastAPI

from roster.core.config import LOG_LEVEL
from roster.core.errors import register_error_handlers
from roster.core.logging_middleware import LoggingMiddleware
from roster.db.init_db import init_db
from roster.db.session import SessionLocal
from roster.routers.weekly_data import router as weekly_data_router
from roster.services.persistence import PersistenceGateway
from roster.services.table import RosterTable

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Weekly Roster")

# Middleware
app.add_middleware(LoggingMiddleware)

register_error_handlers(app)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event: schema, then hydrate the shared table from storage
@app.on_event("startup")
def on_startup():
    init_db()
    rows = PersistenceGateway(SessionLocal).load()
    app.state.table = RosterTable(rows)
    logger.info("loaded %d roster rows", len(rows))


app.include_router(weekly_data_router, tags=["weekly data"])
