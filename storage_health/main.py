import logging

from fastapi import FastAPI

from .api import disks
from .config import get_settings

logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="Storage Health Monitor")

app.include_router(disks.router, prefix="/disks", tags=["disks"])
