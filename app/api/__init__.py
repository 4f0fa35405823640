"""API 라우터 패키지: 모든 엔드포인트 통합.

API Router package, aggregating all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - users: 사용자 관리 (User management, /users)
"""

from fastapi import APIRouter

from app.api.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["User Management"])
