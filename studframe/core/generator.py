"""Main framing generator — orchestrates analysis and rule execution."""

from __future__ import annotations
from typing import Iterable

from studframe.errors import InvalidWallError
from studframe.models import (
    WallDescriptor, OpeningDescriptor, FramingLayout, FramingParams,
    GenerationConfig, FramingContext,
)
from studframe.core.registry import RuleRegistry
from studframe.core.analyzer import OpeningAnalyzer


class FrameGenerator:
    """
    Stateless framing generator.

    Takes one wall + its openings + params, resolves the openings, runs the
    applicable rules in order (studs, plates, opening framing) and returns
    the complete FramingLayout. Safe to share between threads.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = OpeningAnalyzer()

    def generate(
        self,
        wall: WallDescriptor,
        openings: Iterable[OpeningDescriptor] = (),
        params: FramingParams | None = None,
        config: GenerationConfig | None = None,
    ) -> FramingLayout:
        if params is None:
            params = FramingParams()
        if config is None:
            config = GenerationConfig()

        problems = wall.problems()
        if problems:
            raise InvalidWallError(wall.id, problems)

        # Build context
        context = FramingContext(wall=wall, params=params, config=config)

        # Analysis phase — hosted openings, unusable geometry set aside
        self.analyzer.analyze(context, openings)

        # Generation phase — run applicable rules
        for rule in self.registry.get_applicable_rules(context):
            context.add_members(rule.generate(context))

        return FramingLayout(
            wall_id=wall.id,
            members=context.members,
            skipped_openings=context.skipped_openings,
        )
