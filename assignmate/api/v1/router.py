from fastapi import APIRouter

from assignmate.api.v1 import analyze, generate

router = APIRouter()
router.include_router(generate.router, tags=["generate"])
router.include_router(analyze.router, tags=["analyze"])
