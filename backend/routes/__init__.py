"""FastAPI API endpoints under /api.

Endpoint groups: health + settings, catalogue (cities and their activities),
and day plans. A city's plan and its planned activities are nested under
/api/plans/{city_id}/.

Validation failures come back as 400 with the rule message as "detail"
("overlaps", "one transfer", "06:00 and 22:00"); unknown cities, activities
and planned entries are 404.
"""

from fastapi import APIRouter

from .catalogue import router as catalogue_router
from .plans import router as plans_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(catalogue_router)
router.include_router(plans_router)
