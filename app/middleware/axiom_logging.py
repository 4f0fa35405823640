"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends one structured event per request
to Axiom: endpoint, method, path/query params, body, status code, duration
and error reason. Secrets and customer personal data (email, phone,
external identity) are masked before they leave the process.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 (Secret-like keys)
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 개인정보 필드 패턴 (Customer personal data, camelCase and snake_case)
_PERSONAL_KEYS = re.compile(r"^(email|phone|keycloak_?id)$", re.IGNORECASE)

# 로깅 제외 경로 (Paths excluded from logging)
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MASK = "***"


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감/개인정보 필드 자동 마스킹 (Recursively mask sensitive fields in dicts/lists)."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: _MASK
            if _SENSITIVE_KEYS.search(k) or _PERSONAL_KEYS.match(k)
            else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 (Truncate large string values)."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 (Extract a short error reason from a response body).

    404s from /api/users carry no body at all, so an empty body maps to "".
    """
    if not body:
        return ""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    detail = data.get("detail", data) if isinstance(data, dict) else data
    text = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    if len(text) > 500:
        text = text[:500] + "..."
    return text


def _path_params(request: Request) -> dict[str, Any]:
    """경로 파라미터 추출 (Path params of the route matching this request).

    BaseHTTPMiddleware runs before routing, so ``request.path_params`` is
    empty here; the params are resolved against the app's routes instead.
    """
    if request.path_params:
        return dict(request.path_params)
    app = request.scope.get("app")
    router = getattr(app, "router", None)
    for route in getattr(router, "routes", []):
        match, child_scope = route.matches(request.scope)
        if match == Match.FULL:
            return dict(child_scope.get("path_params", {}))
    return {}


def build_log_event(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    query_params: dict[str, Any] | None = None,
    path_params: dict[str, Any] | None = None,
    request_body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트 구성 (Build the Axiom log event, omitting empty parts)."""
    event: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if query_params:
        event["query_params"] = _mask_dict(query_params)
    if path_params:
        event["path_params"] = path_params
    if request_body is not None:
        event["request_body"] = request_body
    if error:
        event["error"] = error
    return event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Passes requests through untouched when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return _truncate(_mask_dict(json.loads(body_bytes)))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        request_body: Any = await self._read_body(request)

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 다시 감싸서 반환 (Re-wrap the consumed body)
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event = build_log_event(
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                query_params=dict(request.query_params) or None,
                path_params=_path_params(request) or None,
                request_body=request_body,
                error=error_detail,
            )
            try:
                # axiom-py 클라이언트는 동기 HTTP 호출 (Blocking client call, kept off the event loop)
                await run_in_threadpool(self._client.ingest_events, self._dataset, [event])
            except Exception:
                # 로깅 실패가 요청 처리에 영향주지 않도록 (Never break a request on log failure)
                logger.warning("Axiom ingest failed for %s %s", request.method, request.url.path, exc_info=True)

        return response
