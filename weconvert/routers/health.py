from fastapi import APIRouter

from weconvert.config.constants import APP_VERSION

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health():
    return {"status": "ok", "version": APP_VERSION}
