"""Sifters: the analytical stages of the fact-check pipeline.

Each stage is a plain, synchronous component over text, URLs or upstream
scores:

- extraction: EntityExtractor
- detection: ClaimAnalyzer, SensationalismDetector,
  CredibilityIndicatorDetector, KnownPatternMatcher
- credibility: SourceCredibilityResolver, UrlSafetyInspector
- scoring: CrossVerificationScorer, ContentConsistencyCalculator,
  OverallScoreAggregator, ClassificationDecider
- reasoning: ReasoningGenerator
- verification: draw sources and VerificationStatusAssigner
"""
