"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from studframe.services.frame_service import FrameService
from studframe.services.sinks import ListSink, emit_layout
from studframe.api.schemas import FrameRequest, FrameResponse, RuleInfo

router = APIRouter()


def get_service(request: Request) -> FrameService:
    """The service the app was built with (see create_app)."""
    return request.app.state.frame_service


@router.post("/frame", response_model=FrameResponse)
async def frame_wall(
    request: FrameRequest, service: FrameService = Depends(get_service),
) -> FrameResponse:
    """Frame one wall and return the members as drawn into an in-memory sink.

    An invalid wall surfaces as HTTP 422 through the app's InvalidWallError
    handler. Params left out of the body fall back to the service's own.
    """
    params = request.params if "params" in request.model_fields_set else None
    layout = service.generate(request.wall, request.openings, params, request.config)
    report = emit_layout(layout, ListSink())
    return FrameResponse(
        layout=layout,
        report=report,
        rule_count=len(service.list_rules()),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(service: FrameService = Depends(get_service)) -> list[RuleInfo]:
    """List all available framing rules."""
    return [RuleInfo(**r) for r in service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
