"""Natural-language reasoning from scores, entities and verdict.

Reasoning is an ordered table of sections. Each section holds
(predicate, template) rules; the first rule whose predicate holds emits
one sentence and the section ends. Sections with no matching rule emit
nothing.

| # | Section              | Always emits | Rules (first match wins)                  |
|---|----------------------|--------------|-------------------------------------------|
| 1 | source_credibility   | yes          | >= 80, >= 60, <= 30, otherwise            |
| 2 | content_consistency  | no           | >= 80, <= 40                              |
| 3 | cross_verification   | yes          | >= 80, <= 40, otherwise                   |
| 4 | disputed_entities    | no           | count > 0                                 |
| 5 | verified_entities    | no           | count > 0                                 |
| 6 | classification       | yes          | Likely Real, Likely Fake, Unverifiable    |
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from loguru import logger

from factcheck_system.data_management.schemas import (
    Classification,
    EntityReference,
    VerificationStatus,
)


@dataclass(frozen=True)
class ReasoningContext:
    """Inputs available to reasoning predicates and templates."""

    classification: Classification
    source_credibility: int
    content_consistency: int
    cross_verification: int
    verified_count: int
    disputed_count: int

    @classmethod
    def build(
        cls,
        classification: Classification,
        source_credibility: int,
        content_consistency: int,
        cross_verification: int,
        entities: Sequence[EntityReference],
    ) -> "ReasoningContext":
        return cls(
            classification=classification,
            source_credibility=source_credibility,
            content_consistency=content_consistency,
            cross_verification=cross_verification,
            verified_count=sum(
                1 for e in entities if e.verification_status == VerificationStatus.VERIFIED
            ),
            disputed_count=sum(
                1 for e in entities if e.verification_status == VerificationStatus.DISPUTED
            ),
        )


Predicate = Callable[[ReasoningContext], bool]
Template = Callable[[ReasoningContext], str]


@dataclass(frozen=True)
class ReasoningRule:
    predicate: Predicate
    template: Template


@dataclass(frozen=True)
class ReasoningSection:
    name: str
    rules: Tuple[ReasoningRule, ...]

    def render(self, ctx: ReasoningContext) -> Optional[str]:
        for rule in self.rules:
            if rule.predicate(ctx):
                return rule.template(ctx)
        return None


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _fixed(sentence: str) -> Template:
    return lambda ctx: sentence


def _disputed_sentence(ctx: ReasoningContext) -> str:
    n = ctx.disputed_count
    return (
        f"{n} key {_plural(n, 'claim', 'claims')} in this content "
        f"{_plural(n, 'has', 'have')} been disputed by fact-checkers."
    )


def _verified_sentence(ctx: ReasoningContext) -> str:
    n = ctx.verified_count
    return (
        f"{n} key {_plural(n, 'element', 'elements')} in this content "
        f"{_plural(n, 'has', 'have')} been verified as accurate."
    )


DEFAULT_SECTIONS: Tuple[ReasoningSection, ...] = (
    ReasoningSection("source_credibility", (
        ReasoningRule(
            lambda ctx: ctx.source_credibility >= 80,
            _fixed("The information comes from a highly credible source with a strong track record of accuracy."),
        ),
        ReasoningRule(
            lambda ctx: ctx.source_credibility >= 60,
            _fixed("The source has a moderate level of credibility in reporting factual information."),
        ),
        ReasoningRule(
            lambda ctx: ctx.source_credibility <= 30,
            _fixed("The source has a history of publishing misleading or unverified information."),
        ),
        ReasoningRule(
            lambda ctx: True,
            _fixed("The source credibility could not be fully determined."),
        ),
    )),
    ReasoningSection("content_consistency", (
        ReasoningRule(
            lambda ctx: ctx.content_consistency >= 80,
            _fixed("The content uses measured language consistent with factual reporting."),
        ),
        ReasoningRule(
            lambda ctx: ctx.content_consistency <= 40,
            _fixed("The content uses sensationalist language often associated with misleading information."),
        ),
    )),
    ReasoningSection("cross_verification", (
        ReasoningRule(
            lambda ctx: ctx.cross_verification >= 80,
            _fixed("Key claims and entities in this content can be independently verified."),
        ),
        ReasoningRule(
            lambda ctx: ctx.cross_verification <= 40,
            _fixed("Multiple claims in this content could not be verified or were found to be misleading."),
        ),
        ReasoningRule(
            lambda ctx: True,
            _fixed("Some claims in this content could be verified, while others require further investigation."),
        ),
    )),
    ReasoningSection("disputed_entities", (
        ReasoningRule(lambda ctx: ctx.disputed_count > 0, _disputed_sentence),
    )),
    ReasoningSection("verified_entities", (
        ReasoningRule(lambda ctx: ctx.verified_count > 0, _verified_sentence),
    )),
    ReasoningSection("classification", (
        ReasoningRule(
            lambda ctx: ctx.classification == Classification.LIKELY_REAL,
            _fixed("Based on our analysis, this content appears to be factually accurate."),
        ),
        ReasoningRule(
            lambda ctx: ctx.classification == Classification.LIKELY_FAKE,
            _fixed("This content contains multiple indicators of potential misinformation."),
        ),
        ReasoningRule(
            lambda ctx: True,
            _fixed("There is insufficient information to determine the accuracy of this content with high confidence."),
        ),
    )),
)


class ReasoningGenerator:
    """
    Turns intermediate scores into ordered justifications.

    Usage:
        generator = ReasoningGenerator()
        reasons = generator.generate(ReasoningContext.build(...))

    Attributes:
        sections: Ordered reasoning sections
    """

    def __init__(self, sections: Optional[Sequence[ReasoningSection]] = None):
        self.sections: Tuple[ReasoningSection, ...] = tuple(sections or DEFAULT_SECTIONS)
        self._logger = logger.bind(component="ReasoningGenerator")

    def generate(self, ctx: ReasoningContext) -> List[str]:
        reasoning = []
        emitted = []
        for section in self.sections:
            sentence = section.render(ctx)
            if sentence is not None:
                reasoning.append(sentence)
                emitted.append(section.name)
        self._logger.debug(f"Generated {len(reasoning)} reasons", sections=emitted)
        return reasoning


__all__ = [
    "ReasoningGenerator",
    "ReasoningContext",
    "ReasoningRule",
    "ReasoningSection",
    "DEFAULT_SECTIONS",
]
