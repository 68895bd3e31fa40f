"""
Supplier Sustainability Engine — FastAPI Application Entry Point

GET  /v1/suppliers[/{id}]           → scored suppliers (score derived on read)
PUT  /v1/admin/weights              → replace global scoring weights
POST /v1/simulation                 → what-if supplier switch projection
GET  /v1/dashboard/metrics          → portfolio summary
GET  /v1/health                     → health check
GET  /docs                          → OpenAPI / Swagger UI
"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from sustain_engine.api.admin_endpoint import router as admin_router
from sustain_engine.api.dashboard_endpoint import router as dashboard_router
from sustain_engine.api.simulation_endpoint import router as simulation_router
from sustain_engine.api.supplier_endpoint import router as supplier_router
from sustain_engine.core.config import get_settings

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer() if get_settings().app_env == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(get_settings().log_level),
)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("sustainability_engine_starting", engine_version=get_settings().engine_version)
    yield
    logger.info("sustainability_engine_shutting_down")


app = FastAPI(
    title="Supplier Sustainability Engine",
    description="Sustainability scoring, risk classification and what-if simulation for procurement",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (procurement frontend) ──
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # tighten in production
    allow_methods=["POST", "GET", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
    expose_headers=["X-Weights-Advisory"],
)

# ── Prometheus metrics ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# ── Routes ──
app.include_router(supplier_router)
app.include_router(admin_router)
app.include_router(simulation_router)
app.include_router(dashboard_router)


@app.get("/v1/health", tags=["health"])
async def health():
    return {"status": "ok", "service": get_settings().app_name, "engine_version": get_settings().engine_version}


@app.get("/", include_in_schema=False)
async def root():
    return {
        "service": get_settings().app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "suppliers": "GET /v1/suppliers",
        "simulate": "POST /v1/simulation",
    }
