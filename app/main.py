"""FastAPI application for the dashboard gateway and the news/movies proxy."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router as api_router
from .config import settings
from .proxy import router as proxy_router

app = FastAPI(title="Public API Dashboard Gateway")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(proxy_router)
app.include_router(api_router)
