"""Framing rule interface.

A rule is one step of framing a wall (studs, plates, opening framing).
Rules declare who they are as class attributes; the registry orders them
by `priority` and `dependencies` and the generator concatenates their
members in that order.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar

from studframe.models.context import FramingContext
from studframe.models.framing import FramingMember


class FramingRule(ABC):
    """
    Base class for all framing rules.

    Subclasses set `rule_id`, `name` and `priority` and implement
    `generate()`; they override `applies()` when the step can be skipped
    for a wall. `generate()` reads the context and returns new members
    without mutating it.
    """

    rule_id: ClassVar[str]          # Referenced by GenerationConfig (e.g. 'wall.studs')
    name: ClassVar[str]             # Human-readable, listed by the API
    priority: ClassVar[int] = 100   # Lower runs first; also fixes the output order
    dependencies: ClassVar[tuple[str, ...]] = ()

    def get_id(self) -> str:
        return self.rule_id

    def get_name(self) -> str:
        return self.name

    def applies(self, context: FramingContext) -> bool:
        return True

    @abstractmethod
    def generate(self, context: FramingContext) -> list[FramingMember]:
        """Members this step contributes for `context.wall`, in emission order."""
        ...
