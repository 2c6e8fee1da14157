"""Hard stops — absolute deal-killers that cap the overall score.

A hard stop is a named predicate over the intake.  Every rule is evaluated,
in order, without short-circuiting, so the caller sees every deal-killer at
once.  New rules are added through :class:`HardStopRegistry` without touching
the pillar scorers or the combiner.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from distribution_readiness.intake.enums import CaptionStatus, ChainOfTitleStatus
from distribution_readiness.intake.model import ProjectIntake

logger = logging.getLogger(__name__)

LONG_FORM_MINUTES = 40


@dataclass(frozen=True)
class HardStopRule:
    """A disqualifying condition.

    Attributes
    ----------
    name:
        Unique rule identifier.
    message:
        Violation text reported when the rule fires.
    predicate:
        Returns True when *intake* violates the rule.
    """

    name: str
    message: str
    predicate: Callable[[ProjectIntake], bool]

    def fires(self, intake: ProjectIntake) -> bool:
        """Return True if the rule fires for *intake*.

        A predicate that raises is logged and treated as not firing.
        """
        try:
            return bool(self.predicate(intake))
        except Exception:  # noqa: BLE001
            logger.warning("Hard-stop rule %r raised; treating as not fired.", self.name, exc_info=True)
            return False


def _captions_missing_for_long_form(intake: ProjectIntake) -> bool:
    return (
        intake.runtime_minutes >= LONG_FORM_MINUTES
        and intake.technical.captions_available is CaptionStatus.NO
    )


def _chain_of_title_missing(intake: ProjectIntake) -> bool:
    return intake.legal.chain_of_title_status is ChainOfTitleStatus.MISSING


CAPTIONS_LONG_FORM = HardStopRule(
    name="captions_long_form",
    message=(
        "Captions missing for long-form content. "
        "Most major services require captions/CC."
    ),
    predicate=_captions_missing_for_long_form,
)

CHAIN_OF_TITLE_MISSING = HardStopRule(
    name="chain_of_title_missing",
    message=(
        "Chain of title missing. "
        "Legal clearance is a deal-killer for reputable distribution."
    ),
    predicate=_chain_of_title_missing,
)

DEFAULT_HARD_STOP_RULES: tuple[HardStopRule, ...] = (
    CAPTIONS_LONG_FORM,
    CHAIN_OF_TITLE_MISSING,
)


def detect_hard_stops(
    intake: ProjectIntake,
    rules: Iterable[HardStopRule] = DEFAULT_HARD_STOP_RULES,
) -> tuple[str, ...]:
    """Return the messages of every rule in *rules* that fires, in rule order."""
    violations = tuple(rule.message for rule in rules if rule.fires(intake))
    if violations:
        logger.debug("Detected %d hard stop(s): %s", len(violations), violations)
    return violations


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class HardStopRuleNotFoundError(KeyError):
    """Raised when a requested hard-stop rule is not registered."""

    def __init__(self, name: str) -> None:
        self.rule_name = name
        super().__init__(f"Hard-stop rule {name!r} is not registered.")


class HardStopRegistry:
    """Ordered registry of :class:`HardStopRule` objects.

    Rules are evaluated in registration order.  A new registry starts with
    :data:`DEFAULT_HARD_STOP_RULES` unless ``include_defaults=False``.

    Example
    -------
    ::

        registry = HardStopRegistry()
        registry.register(
            HardStopRule(
                name="no_master",
                message="No master available.",
                predicate=lambda i: i.technical.master_available is Availability.NO,
            )
        )
        stops = detect_hard_stops(intake, registry)
    """

    def __init__(self, include_defaults: bool = True) -> None:
        self._rules: dict[str, HardStopRule] = {}
        if include_defaults:
            for rule in DEFAULT_HARD_STOP_RULES:
                self.register(rule)

    def register(self, rule: HardStopRule) -> None:
        """Append *rule*.

        Raises
        ------
        ValueError
            If a rule with the same name is already registered.
        """
        if rule.name in self._rules:
            raise ValueError(
                f"Hard-stop rule {rule.name!r} is already registered. "
                "Use a unique name or remove the existing rule first."
            )
        self._rules[rule.name] = rule
        logger.debug("Registered hard-stop rule %r.", rule.name)

    def remove(self, name: str) -> None:
        """Remove the rule called *name*.

        Raises
        ------
        HardStopRuleNotFoundError
            If no rule with that name exists.
        """
        if name not in self._rules:
            raise HardStopRuleNotFoundError(name)
        del self._rules[name]
        logger.debug("Removed hard-stop rule %r.", name)

    def get(self, name: str) -> HardStopRule:
        if name not in self._rules:
            raise HardStopRuleNotFoundError(name)
        return self._rules[name]

    def names(self) -> list[str]:
        """Rule names in evaluation order."""
        return list(self._rules)

    def __iter__(self) -> Iterator[HardStopRule]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __repr__(self) -> str:
        return f"HardStopRegistry(rules={self.names()!r})"


__all__ = [
    "CAPTIONS_LONG_FORM",
    "CHAIN_OF_TITLE_MISSING",
    "DEFAULT_HARD_STOP_RULES",
    "HardStopRegistry",
    "HardStopRule",
    "HardStopRuleNotFoundError",
    "LONG_FORM_MINUTES",
    "detect_hard_stops",
]
