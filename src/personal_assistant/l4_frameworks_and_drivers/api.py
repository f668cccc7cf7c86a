"""HTTP surface — FastAPI routes under ``/api`` bound to a ChatController."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from personal_assistant import __version__
from personal_assistant.l1_entities.errors import EmptyMessageError
from personal_assistant.l1_entities.message import utc_now
from personal_assistant.l3_interface_adapters.controllers.chat_controller import ChatController

log = logging.getLogger('pa.api')

EXPORT_FILENAME = 'chat-history.json'


async def json_object(request: Request) -> dict[str, Any]:
    """Request body as a dict; missing, malformed or non-object bodies read as ``{}``."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def create_app(controller: ChatController, *, cors_origins: list[str] | None = None) -> FastAPI:
    """Build the FastAPI application around an injected controller."""

    @contextlib.asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        await controller.aclose()
        log.info('Completion client closed')

    app = FastAPI(title='Personal Assistant', version=__version__, lifespan=lifespan)
    app.state.controller = controller

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials='*' not in cors_origins,
            allow_methods=['*'],
            allow_headers=['*'],
        )

    @app.exception_handler(EmptyMessageError)
    async def empty_message(request: Request, exc: EmptyMessageError) -> JSONResponse:
        log.info('Rejected %s %s: %s', request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={'success': False, 'error': str(exc)})

    app.include_router(build_router(controller))
    return app


def build_router(controller: ChatController) -> APIRouter:
    router = APIRouter(prefix='/api')

    @router.post('/chat')
    async def chat(body: dict[str, Any] = Depends(json_object)) -> dict[str, Any]:
        result = await controller.send_message(body.get('message'))
        reply = result.reply.to_wire()
        return {
            'success': result.ok,
            'message': reply['content'],
            'timestamp': reply['timestamp'],
            'tokens': result.reply.tokens,
            'model': result.reply.model,
        }

    @router.get('/history')
    async def get_history() -> dict[str, Any]:
        return {'success': True, 'history': [m.to_wire() for m in controller.history()]}

    @router.delete('/history')
    async def clear_history() -> dict[str, Any]:
        controller.clear_history()
        return {'success': True, 'message': 'History cleared'}

    @router.get('/settings')
    async def get_settings() -> dict[str, Any]:
        return {
            'success': True,
            'settings': controller.get_settings().to_wire(),
            'models': controller.allowed_models,
        }

    @router.put('/settings')
    async def update_settings(body: dict[str, Any] = Depends(json_object)) -> dict[str, Any]:
        merged = controller.update_settings(body)
        return {'success': True, 'settings': merged.to_wire(), 'message': 'Settings updated'}

    @router.get('/export')
    async def export() -> JSONResponse:
        return JSONResponse(
            content=controller.export(),
            headers={'Content-Disposition': f'attachment; filename={EXPORT_FILENAME}'},
        )

    @router.get('/status')
    async def status() -> dict[str, Any]:
        total, model = controller.status()
        return {
            'success': True,
            'status': 'Server is running!',
            'timestamp': utc_now().isoformat(),
            'totalMessages': total,
            'currentModel': model,
        }

    return router
