"""Fact-check pipeline: text (+ optional source URL) -> FactCheckResult.

Stage order:
1. Entity extraction, claim analysis, sensationalism and credibility
   indicator detection over the same text
2. Source credibility over the optional URL
3. Cross verification (entities + claim score) and content consistency
   (sensationalism vs. indicators)
4. Weighted aggregate, clamped to 0-100
5. Classification, known-pattern flags and reasoning

Pure and synchronous. The draw source is reset at the start of every call,
so identical input always yields an identical result.

Usage:
    from factcheck_system.pipeline import FactCheckPipeline

    pipeline = FactCheckPipeline()
    result = pipeline.analyze("Studies show ...", "https://www.reuters.com/...")
"""

from typing import Optional

from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import FactCheckResult
from factcheck_system.sifters.credibility import SourceCredibilityResolver
from factcheck_system.sifters.detection import (
    ClaimAnalyzer,
    CredibilityIndicatorDetector,
    KnownPatternMatcher,
    SensationalismDetector,
)
from factcheck_system.sifters.extraction import EntityExtractor
from factcheck_system.sifters.reasoning import ReasoningContext, ReasoningGenerator
from factcheck_system.sifters.scoring import (
    ClassificationDecider,
    ContentConsistencyCalculator,
    CrossVerificationScorer,
    OverallScoreAggregator,
)
from factcheck_system.sifters.verification import (
    DrawSource,
    VerificationStatusAssigner,
    build_draw_source,
)
from factcheck_system.utils.logging import get_correlation_id, get_structured_logger


class FactCheckPipeline:
    """Orchestrates the heuristic stages into a single verdict.

    Every component is injectable; defaults come from the config tables and
    settings. Components that draw values (entity statuses, source offset)
    share the pipeline's draw source.
    """

    def __init__(
        self,
        draws: Optional[DrawSource] = None,
        entity_extractor: Optional[EntityExtractor] = None,
        claim_analyzer: Optional[ClaimAnalyzer] = None,
        sensationalism_detector: Optional[SensationalismDetector] = None,
        credibility_detector: Optional[CredibilityIndicatorDetector] = None,
        source_resolver: Optional[SourceCredibilityResolver] = None,
        cross_verification: Optional[CrossVerificationScorer] = None,
        content_consistency: Optional[ContentConsistencyCalculator] = None,
        aggregator: Optional[OverallScoreAggregator] = None,
        classifier: Optional[ClassificationDecider] = None,
        pattern_matcher: Optional[KnownPatternMatcher] = None,
        reasoning_generator: Optional[ReasoningGenerator] = None,
    ) -> None:
        """Initialize FactCheckPipeline.

        Args:
            draws: Draw source. Built from settings (seed / salt) if None.
            entity_extractor: Pre-configured extractor sharing ``draws``.
            source_resolver: Pre-configured resolver sharing ``draws``.
            Remaining arguments override the default stage components.
        """
        self.draws = draws or build_draw_source(
            seed=settings.verification_seed,
            salt=settings.draw_salt,
        )
        self.entity_extractor = entity_extractor or EntityExtractor(
            status_assigner=VerificationStatusAssigner(draws=self.draws),
            max_entities=settings.max_entities,
        )
        self.claim_analyzer = claim_analyzer or ClaimAnalyzer()
        self.sensationalism_detector = sensationalism_detector or SensationalismDetector()
        self.credibility_detector = credibility_detector or CredibilityIndicatorDetector()
        self.source_resolver = source_resolver or SourceCredibilityResolver(draws=self.draws)
        self.cross_verification = cross_verification or CrossVerificationScorer()
        self.content_consistency = content_consistency or ContentConsistencyCalculator()
        self.aggregator = aggregator or OverallScoreAggregator()
        self.classifier = classifier or ClassificationDecider(
            real_threshold=settings.real_threshold,
            fake_threshold=settings.fake_threshold,
        )
        self.pattern_matcher = pattern_matcher or KnownPatternMatcher()
        self.reasoning_generator = reasoning_generator or ReasoningGenerator()

    def analyze(self, content: str, source_url: Optional[str] = None) -> FactCheckResult:
        """Run every stage over the content and build the result.

        Args:
            content: Submitted text. May be empty.
            source_url: Optional source URL. Absent, empty or malformed
                URLs resolve to a neutral source credibility of 50.

        Returns:
            Frozen FactCheckResult.

        Raises:
            TypeError: If content is not a string.
        """
        if not isinstance(content, str):
            raise TypeError(f"content must be str, not {type(content).__name__}")

        log = get_structured_logger("FactCheckPipeline", analysis_id=get_correlation_id())
        log.info(
            "analysis_started",
            content_length=len(content),
            has_source=bool(source_url),
        )

        self.draws.reset()

        entities = self.entity_extractor.extract(content)
        claim_score = self.claim_analyzer.score(content)
        sensationalism = self.sensationalism_detector.score(content)
        indicators = self.credibility_detector.score(content)

        source_credibility = self.source_resolver.score(source_url)

        cross_verification = self.cross_verification.score(entities, claim_score)
        content_consistency = self.content_consistency.calculate(sensationalism, indicators)

        confidence = self.aggregator.score(
            source_credibility,
            cross_verification,
            content_consistency,
        )
        classification = self.classifier.decide(confidence)

        reasoning = self.reasoning_generator.generate(
            ReasoningContext.build(
                classification=classification,
                source_credibility=source_credibility,
                content_consistency=content_consistency,
                cross_verification=cross_verification,
                entities=entities,
            )
        )
        known_patterns = self.pattern_matcher.match(content)

        result = FactCheckResult(
            classification=classification,
            confidence_score=confidence,
            reasoning=reasoning,
            entities=entities,
            source_credibility=source_credibility,
            content_consistency=content_consistency,
            cross_verification=cross_verification,
            known_patterns=known_patterns,
        )

        log.info(
            "analysis_complete",
            classification=classification.value,
            confidence=confidence,
            source_credibility=source_credibility,
            cross_verification=cross_verification,
            content_consistency=content_consistency,
            entity_count=len(entities),
            known_pattern_count=len(known_patterns),
        )
        return result


_default_pipeline: Optional[FactCheckPipeline] = None


def get_pipeline() -> FactCheckPipeline:
    """Lazily built pipeline configured from settings."""
    global _default_pipeline
    if _default_pipeline is None:
        _default_pipeline = FactCheckPipeline()
    return _default_pipeline


def analyze(content: str, source_url: Optional[str] = None) -> FactCheckResult:
    """Analyze content with the default pipeline."""
    return get_pipeline().analyze(content, source_url)


__all__ = ["FactCheckPipeline", "analyze", "get_pipeline"]
