# api.py
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from honeyscan.config import Settings, configure_logging
from honeyscan.core.analyze import Scanner, build_scanner
from honeyscan.errors import InvalidAddressError, ScanFailedError, UnknownNetworkError
from honeyscan.models import NetworkDescriptor, RecentScanEntry, ScanResult
from honeyscan.networks import DEFAULT_NETWORK, NETWORKS

settings = Settings.from_env()
configure_logging(settings.log_level)
logger = logging.getLogger("honeyscan.api")

app = FastAPI(title="Honeyscan API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api = APIRouter(prefix="/api")


@lru_cache(maxsize=1)
def get_scanner() -> Scanner:
    logger.info("[API] building scanner data_dir=%s fallback=%s", settings.data_dir, settings.fallback_enabled)
    return build_scanner(settings)


@api.get("/health")
def health():
    return {"ok": True}


@api.get("/networks", response_model=List[NetworkDescriptor])
def networks():
    return list(NETWORKS.values())


@api.get("/validate/{address}")
def validate(address: str, scanner: Scanner = Depends(get_scanner)):
    return {"address": address, "valid": scanner.validate(address)}


@api.get("/scan/{address}", response_model=ScanResult)
def scan(address: str, network: str = Query(default=DEFAULT_NETWORK), scanner: Scanner = Depends(get_scanner)):
    logger.info("[API] GET /api/scan/%s?network=%s", address, network)
    try:
        return scanner.scan(address, network)
    except (InvalidAddressError, UnknownNetworkError) as e:
        logger.info("[API] /scan rejected address=%s network=%s -> %s", address, network, e)
        raise HTTPException(status_code=400, detail=str(e))
    except ScanFailedError as e:
        raise HTTPException(status_code=500, detail=str(e))


@api.get("/recent", response_model=List[RecentScanEntry])
def recent(scanner: Scanner = Depends(get_scanner)):
    return scanner.recent_scans()


# Register API first, then static site at /
app.include_router(api)

static_dir = Path("web")
if static_dir.exists():
    app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="web")
    logger.info("[API] Static mount: / -> web/")
