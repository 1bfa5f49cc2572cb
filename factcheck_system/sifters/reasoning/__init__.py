"""Reasoning synthesis: ordered (predicate, template) rule sections."""

from factcheck_system.sifters.reasoning.reasoning_generator import (
    DEFAULT_SECTIONS,
    ReasoningContext,
    ReasoningGenerator,
    ReasoningRule,
    ReasoningSection,
)

__all__ = [
    "ReasoningGenerator",
    "ReasoningContext",
    "ReasoningRule",
    "ReasoningSection",
    "DEFAULT_SECTIONS",
]
