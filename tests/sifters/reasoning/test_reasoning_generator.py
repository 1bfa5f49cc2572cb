"""Tests for ReasoningGenerator.

Tests cover:
- Section order and which sections always emit
- Threshold boundaries per section
- Singular / plural entity sentences
"""

import pytest

from factcheck_system.data_management.schemas import (
    Classification,
    EntityKind,
    EntityReference,
    VerificationStatus,
)
from factcheck_system.sifters.reasoning import (
    ReasoningContext,
    ReasoningGenerator,
    ReasoningRule,
    ReasoningSection,
)

HIGH_SOURCE = "The information comes from a highly credible source with a strong track record of accuracy."
MODERATE_SOURCE = "The source has a moderate level of credibility in reporting factual information."
LOW_SOURCE = "The source has a history of publishing misleading or unverified information."
UNKNOWN_SOURCE = "The source credibility could not be fully determined."
MEASURED = "The content uses measured language consistent with factual reporting."
SENSATIONAL = "The content uses sensationalist language often associated with misleading information."
VERIFIABLE = "Key claims and entities in this content can be independently verified."
UNVERIFIABLE_CLAIMS = "Multiple claims in this content could not be verified or were found to be misleading."
MIXED_CLAIMS = "Some claims in this content could be verified, while others require further investigation."
REAL = "Based on our analysis, this content appears to be factually accurate."
FAKE = "This content contains multiple indicators of potential misinformation."
INSUFFICIENT = (
    "There is insufficient information to determine the accuracy of this content with high confidence."
)


def context(
    classification=Classification.UNVERIFIABLE,
    source=50,
    consistency=60,
    cross=60,
    verified=0,
    disputed=0,
):
    return ReasoningContext(
        classification=classification,
        source_credibility=source,
        content_consistency=consistency,
        cross_verification=cross,
        verified_count=verified,
        disputed_count=disputed,
    )


@pytest.fixture
def generator():
    return ReasoningGenerator()


class TestSectionOrder:
    """Tests for overall structure."""

    def test_minimum_three_sentences(self, generator):
        """Source, cross-verification and verdict always emit."""
        assert generator.generate(context()) == [UNKNOWN_SOURCE, MIXED_CLAIMS, INSUFFICIENT]

    def test_full_order(self, generator):
        """All six sections emit in order."""
        reasons = generator.generate(
            context(
                classification=Classification.LIKELY_REAL,
                source=90,
                consistency=130,
                cross=85,
                verified=3,
                disputed=1,
            )
        )
        assert reasons == [
            HIGH_SOURCE,
            MEASURED,
            VERIFIABLE,
            "1 key claim in this content has been disputed by fact-checkers.",
            "3 key elements in this content have been verified as accurate.",
            REAL,
        ]


class TestThresholds:
    """Tests for per-section boundaries."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            (80, HIGH_SOURCE),
            (79, MODERATE_SOURCE),
            (60, MODERATE_SOURCE),
            (59, UNKNOWN_SOURCE),
            (31, UNKNOWN_SOURCE),
            (30, LOW_SOURCE),
            (0, LOW_SOURCE),
        ],
    )
    def test_source(self, generator, source, expected):
        """Source credibility sentence by band."""
        assert generator.generate(context(source=source))[0] == expected

    @pytest.mark.parametrize(
        "consistency,expected",
        [(200, MEASURED), (80, MEASURED), (40, SENSATIONAL), (0, SENSATIONAL)],
    )
    def test_consistency_emits(self, generator, consistency, expected):
        """Consistency sentence at the extremes."""
        assert generator.generate(context(consistency=consistency))[1] == expected

    @pytest.mark.parametrize("consistency", [41, 60, 79])
    def test_consistency_silent_in_middle(self, generator, consistency):
        """No consistency sentence between 41 and 79."""
        reasons = generator.generate(context(consistency=consistency))
        assert MEASURED not in reasons and SENSATIONAL not in reasons
        assert len(reasons) == 3

    @pytest.mark.parametrize(
        "cross,expected",
        [(80, VERIFIABLE), (79, MIXED_CLAIMS), (41, MIXED_CLAIMS), (40, UNVERIFIABLE_CLAIMS), (-38, UNVERIFIABLE_CLAIMS)],
    )
    def test_cross_verification(self, generator, cross, expected):
        """Cross-verification sentence by band."""
        assert generator.generate(context(cross=cross))[1] == expected

    @pytest.mark.parametrize(
        "classification,expected",
        [
            (Classification.LIKELY_REAL, REAL),
            (Classification.LIKELY_FAKE, FAKE),
            (Classification.UNVERIFIABLE, INSUFFICIENT),
        ],
    )
    def test_verdict_last(self, generator, classification, expected):
        """Verdict sentence closes the list."""
        assert generator.generate(context(classification=classification))[-1] == expected


class TestEntitySentences:
    """Tests for entity count sentences."""

    def test_plural_disputed(self, generator):
        """Plural form for several disputed claims."""
        reasons = generator.generate(context(disputed=2))
        assert "2 key claims in this content have been disputed by fact-checkers." in reasons

    def test_singular_verified(self, generator):
        """Singular form for one verified element."""
        reasons = generator.generate(context(verified=1))
        assert "1 key element in this content has been verified as accurate." in reasons

    def test_disputed_before_verified(self, generator):
        """Disputed sentence precedes verified sentence."""
        reasons = generator.generate(context(verified=2, disputed=2))
        assert reasons[2].startswith("2 key claims")
        assert reasons[3].startswith("2 key elements")


class TestContextBuild:
    """Tests for ReasoningContext.build."""

    def test_counts_statuses(self):
        """Verified and disputed entities are counted; unverified ignored."""
        entities = [
            EntityReference(name="a", kind=EntityKind.PERSON, verification_status=VerificationStatus.VERIFIED),
            EntityReference(name="b", kind=EntityKind.CLAIM, verification_status=VerificationStatus.DISPUTED),
            EntityReference(name="c", kind=EntityKind.LOCATION, verification_status=VerificationStatus.UNVERIFIED),
            EntityReference(name="d", kind=EntityKind.DATE, verification_status=VerificationStatus.VERIFIED),
        ]
        ctx = ReasoningContext.build(
            classification=Classification.UNVERIFIABLE,
            source_credibility=50,
            content_consistency=100,
            cross_verification=50,
            entities=entities,
        )
        assert (ctx.verified_count, ctx.disputed_count) == (2, 1)


class TestCustomSections:
    """Tests for substituted section tables."""

    def test_custom_section(self):
        """Custom sections replace the defaults."""
        section = ReasoningSection(
            "always",
            (ReasoningRule(lambda ctx: True, lambda ctx: f"Score {ctx.source_credibility}."),),
        )
        assert ReasoningGenerator(sections=[section]).generate(context(source=42)) == ["Score 42."]
