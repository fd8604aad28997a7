from fastapi import APIRouter

from leavetrack.api.employees import employees_router
from leavetrack.api.reports import reports_router
from leavetrack.api.requests import requests_router

api_router = APIRouter()
api_router.include_router(employees_router)
api_router.include_router(requests_router)
api_router.include_router(reports_router)
