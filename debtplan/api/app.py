"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debtplan.config import settings
from debtplan.api.routes import payoff, utilization

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Debt Plan",
    description="Credit card payoff planning and utilization analytics",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(payoff.router)
app.include_router(utilization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
