from fastapi import APIRouter
from quiz_api.modules.auth import api as auth
from quiz_api.modules.elements import api as elements
from quiz_api.modules.participants import api as participants
from quiz_api.modules.rankings import api as rankings

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(rankings.router, prefix="/ranking", tags=["ranking"])
router.include_router(participants.router, prefix="/participantes", tags=["participantes"])
router.include_router(elements.router, prefix="/elementos", tags=["elementos"])
