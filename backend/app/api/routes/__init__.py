"""
Aggregate API routes.

Convention: Use "" (not "/") for the root path of a segment (e.g. @router.get(""), @router.post(""))
so the route is /accounts not /accounts/. This avoids 307 redirects when the
request arrives without a trailing slash.
"""

from fastapi import APIRouter

from app.api.endpoints import accounts

api_router = APIRouter()

api_router.include_router(accounts.router, prefix="")
