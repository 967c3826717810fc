from fastapi import APIRouter

from htmx_demo.routes.contact import router as contact_router
from htmx_demo.routes.counter import router as counter_router
from htmx_demo.routes.health import router as health_router

demo_router = APIRouter()

demo_router.include_router(health_router)
demo_router.include_router(contact_router)
demo_router.include_router(counter_router)
