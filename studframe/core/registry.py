"""Rule registry — stores framing rules and resolves their run order."""

from __future__ import annotations

from studframe.models.context import FramingContext
from studframe.rules.base import FramingRule


class RuleRegistry:
    """
    Central registry for all framing rules.

    Rules are registered once. For each wall the registry hands back the
    rules that apply, sorted by priority, with each rule placed after the
    rules it depends on.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        """Register a framing rule, replacing any rule with the same id."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FramingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FramingRule]:
        """Return all registered rules in registration order."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: FramingContext) -> list[FramingRule]:
        """
        Return the rules to run for `context`, in execution order.

        GenerationConfig.enabled_rules narrows the candidates (empty means
        all of them), then GenerationConfig.disabled_rules removes rules.
        A dependency that was filtered out is not pulled back in.
        """
        config = context.config
        candidates = [
            rule for rule_id, rule in self._rules.items()
            if (not config.enabled_rules or rule_id in config.enabled_rules)
            and rule_id not in config.disabled_rules
        ]

        applicable = sorted(
            (r for r in candidates if r.applies(context)),
            key=lambda r: r.priority,
        )
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[FramingRule]) -> list[FramingRule]:
        """Depth-first topological sort over the selected rules."""
        by_id = {r.get_id(): r for r in rules}
        seen: set[str] = set()
        ordered: list[FramingRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in seen or rule_id not in by_id:
                return
            seen.add(rule_id)
            rule = by_id[rule_id]
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with the stud, plate and opening rules."""
    from studframe.rules.wall.studs import WallStudRule
    from studframe.rules.wall.plates import WallPlateRule
    from studframe.rules.opening.frame import OpeningFramingRule

    registry = RuleRegistry()
    registry.register(WallStudRule())
    registry.register(WallPlateRule())
    registry.register(OpeningFramingRule())
    return registry
