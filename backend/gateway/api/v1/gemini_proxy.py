"""
[Gemini] Proxy endpoints.

Two simplified routes in front of Google's APIs. Each refreshes the shared
OAuth access token, makes one downstream call and relays the downstream
status code and JSON body verbatim. Any gateway failure becomes a 500 via
the GatewayError exception handler registered in ``gateway.main``.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gateway.api.dependencies import get_proxy_service
from gateway.gemini.services import GoogleProxyService
from gateway.schemas.gemini import PromptRequest, RelayedResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["gemini-proxy"],
)


def _relay(relayed: RelayedResponse) -> JSONResponse:
    return JSONResponse(status_code=relayed.status_code, content=relayed.body)


@router.post("/generate", summary="[Gemini] Generate content")
async def generate(
    request: PromptRequest,
    service: GoogleProxyService = Depends(get_proxy_service),
):
    """
    Generate content from a single prompt.

    **Request Format:**
    ```json
    {"prompt": "Hello!"}
    ```

    The prompt is wrapped into a native Gemini request with one `user` turn.
    The Gemini response status and body are returned unchanged.
    """
    logger.info(f"[GEMINI] generate request, prompt length {len(request.prompt)}")
    return _relay(await service.generate(request.prompt))


@router.get("/userinfo", summary="[Gemini] OpenID user info")
async def userinfo(
    service: GoogleProxyService = Depends(get_proxy_service),
):
    """
    Return the OpenID Connect userinfo document for the configured account.
    """
    logger.info("[GEMINI] userinfo request")
    return _relay(await service.userinfo())
