"""High-level framing service — facade for hosts and the API layer."""

from __future__ import annotations
import logging
from typing import Iterable

from studframe.models import (
    WallDescriptor, OpeningDescriptor, FramingLayout, FramingParams, GenerationConfig,
)
from studframe.core.generator import FrameGenerator
from studframe.core.registry import RuleRegistry, create_default_registry
from studframe.services.sinks import MemberSink, EmitReport, emit_layout

logger = logging.getLogger(__name__)


class FrameService:
    """Runs the generator for one wall and pushes the result into a sink."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        params: FramingParams | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.params = params or FramingParams()
        self.generator = FrameGenerator(self.registry)

    def generate(
        self,
        wall: WallDescriptor,
        openings: Iterable[OpeningDescriptor] = (),
        params: FramingParams | None = None,
        config: GenerationConfig | None = None,
    ) -> FramingLayout:
        layout = self.generator.generate(wall, openings, params or self.params, config)
        if layout.skipped_openings:
            logger.warning("Wall %s: skipped openings without usable geometry: %s",
                           wall.id, ", ".join(layout.skipped_openings))
        logger.debug("Wall %s: generated %d members", wall.id, layout.stats.total_members)
        return layout

    def frame_and_emit(
        self,
        wall: WallDescriptor,
        openings: Iterable[OpeningDescriptor],
        sink: MemberSink,
        params: FramingParams | None = None,
        config: GenerationConfig | None = None,
    ) -> EmitReport:
        layout = self.generate(wall, openings, params, config)
        return emit_layout(layout, sink)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
