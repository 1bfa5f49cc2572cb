"""Tests for EntityExtractor.

Tests cover:
- People with and without honorifics
- Organizations, excluding names already found as people
- Numeric and long-form dates
- Locations after prepositions, month exclusion, deduplication
- Claim fragments and the minimum length
- Mention counts, extraction order and the entity cap
"""

import pytest

from factcheck_system.data_management.schemas import EntityKind, VerificationStatus
from factcheck_system.sifters.extraction import EntityExtractor, count_occurrences
from factcheck_system.sifters.verification import VerificationStatusAssigner


@pytest.fixture
def extractor(all_verified):
    return EntityExtractor(status_assigner=VerificationStatusAssigner(draws=all_verified))


def names(entities, kind):
    return [e.name for e in entities if e.kind == kind]


class TestCountOccurrences:
    """Tests for count_occurrences."""

    def test_case_insensitive(self):
        """Counts ignore case."""
        assert count_occurrences("Ohio, OHIO and ohio", "Ohio") == 3

    def test_literal_match(self):
        """Regex metacharacters in the term are literal."""
        assert count_occurrences("a+b and A+B but not aab", "a+b") == 2

    def test_empty_term(self):
        """Empty term counts zero."""
        assert count_occurrences("anything", "") == 0


class TestPeople:
    """Tests for person extraction."""

    def test_titled_names(self, extractor):
        """Honorific plus capitalized words form a person."""
        entities = extractor.extract("yesterday President Joe Biden met Senator Bernie Sanders.")
        assert names(entities, EntityKind.PERSON) == ["President Joe Biden", "Senator Bernie Sanders"]

    def test_abbreviated_title(self, extractor):
        """Dotted titles are kept in the name."""
        entities = extractor.extract("the paper was written by Dr. Jane Smith")
        assert "Dr. Jane Smith" in names(entities, EntityKind.PERSON)

    def test_person_not_repeated_as_organization(self, extractor):
        """A capitalized run already found as a person is not an organization."""
        entities = extractor.extract("we met President Joe Biden")
        assert names(entities, EntityKind.PERSON) == ["President Joe Biden"]
        assert names(entities, EntityKind.ORGANIZATION) == []

    def test_people_not_deduplicated(self, extractor):
        """Each match is its own entity, with the full mention count."""
        entities = extractor.extract("we saw Jane Doe and later Jane Doe again")
        people = [e for e in entities if e.kind == EntityKind.PERSON]
        assert [p.name for p in people] == ["Jane Doe", "Jane Doe"]
        assert all(p.mention_count == 2 for p in people)


class TestOrganizations:
    """Tests for organization extraction."""

    def test_leading_capitalized_run(self, extractor):
        """A capitalized run at the start of text is an organization."""
        entities = extractor.extract("United Nations officials met.")
        assert names(entities, EntityKind.ORGANIZATION) == ["United Nations"]
        assert names(entities, EntityKind.PERSON) == []

    def test_single_word_ignored(self, extractor):
        """One capitalized word is not an organization."""
        entities = extractor.extract("Nobody came.")
        assert names(entities, EntityKind.ORGANIZATION) == []


class TestDates:
    """Tests for date extraction."""

    def test_numeric_and_long_form(self, extractor):
        """Both date forms are found in order."""
        entities = extractor.extract("the vote happened on 12/05/2021 and again on March 3rd, 2021.")
        assert names(entities, EntityKind.DATE) == ["12/05/2021", "March 3rd, 2021"]

    def test_dates_always_verified(self, all_disputed):
        """Dates are verified regardless of draws."""
        extractor = EntityExtractor(status_assigner=VerificationStatusAssigner(draws=all_disputed))
        dates = [e for e in extractor.extract("filed on 1/2/2020") if e.kind == EntityKind.DATE]
        assert [d.verification_status for d in dates] == [VerificationStatus.VERIFIED]


class TestLocations:
    """Tests for location extraction."""

    def test_preposition_led(self, extractor):
        """Capitalized word after in/at/from/to, with optional region."""
        entities = extractor.extract("protests spread from Paris to Lyon, France.")
        assert names(entities, EntityKind.LOCATION) == ["Paris", "Lyon, France"]

    def test_month_excluded(self, extractor):
        """Month names after a preposition are not locations."""
        assert extractor.extract("elections held in May were calm") == []

    def test_deduplicated_with_mentions(self, extractor):
        """Repeated locations appear once with the occurrence count."""
        entities = extractor.extract("rallies in Ohio and more rallies in Ohio")
        locations = [e for e in entities if e.kind == EntityKind.LOCATION]
        assert [(l.name, l.mention_count) for l in locations] == [("Ohio", 2)]

    def test_preposition_needs_word_boundary(self, extractor):
        """Prepositions inside longer words do not trigger."""
        assert names(extractor.extract("protesters within Boston"), EntityKind.LOCATION) == []


class TestClaims:
    """Tests for claim extraction."""

    def test_assertive_verb(self, extractor):
        """Assertive verb plus clause up to terminal punctuation."""
        entities = extractor.extract("The report confirms that the tax was cut.")
        assert names(entities, EntityKind.CLAIM) == ["confirms that the tax was cut."]

    def test_according_to(self, extractor):
        """According-to attributions are claims."""
        entities = extractor.extract("According to officials the bridge will reopen.")
        assert names(entities, EntityKind.CLAIM) == ["According to officials the bridge will reopen."]

    def test_is_not_assertion(self, extractor):
        """Copula assertions, including negated ones."""
        entities = extractor.extract("this water supply is not safe to drink.")
        assert names(entities, EntityKind.CLAIM) == ["is not safe to drink."]

    def test_short_fragment_dropped(self, extractor):
        """Fragments shorter than 16 characters are discarded."""
        assert names(extractor.extract("He says no."), EntityKind.CLAIM) == []

    def test_unterminated_clause_ignored(self, extractor):
        """Claims need terminal punctuation."""
        assert names(extractor.extract("the report confirms that nothing happened"), EntityKind.CLAIM) == []

    def test_claim_mention_count_is_one(self, extractor):
        """Claims always carry a mention count of 1."""
        claims = [
            e for e in extractor.extract("Officials say the bridge is safe to cross today.")
            if e.kind == EntityKind.CLAIM
        ]
        assert claims and all(c.mention_count == 1 for c in claims)


class TestOrderingAndCap:
    """Tests for extraction order and truncation."""

    def test_empty_text(self, extractor):
        """Empty text yields no entities."""
        assert extractor.extract("") == []

    def test_kind_order(self, extractor):
        """People, organizations, dates, locations, claims."""
        text = (
            "United Nations staff met President Joe Biden on 4/7/2021 in Geneva "
            "and the memo confirms that talks went well."
        )
        kinds = [e.kind for e in extractor.extract(text)]
        order = [
            EntityKind.PERSON,
            EntityKind.ORGANIZATION,
            EntityKind.DATE,
            EntityKind.LOCATION,
            EntityKind.CLAIM,
        ]
        assert kinds == sorted(kinds, key=order.index)
        assert set(kinds) == set(order)

    def test_capped_at_ten(self, extractor):
        """At most ten entities, truncated in extraction order."""
        cities = [
            "Paris", "Rome", "Berlin", "Madrid", "Vienna", "Prague",
            "Lisbon", "Dublin", "Oslo", "Athens", "Warsaw", "Zurich",
        ]
        text = "trips " + ", ".join(f"to {c}" for c in cities) + "."
        entities = extractor.extract(text)
        assert len(entities) == 10
        assert [e.name for e in entities] == cities[:10]

    def test_custom_cap(self, all_verified):
        """max_entities is configurable."""
        extractor = EntityExtractor(
            status_assigner=VerificationStatusAssigner(draws=all_verified),
            max_entities=2,
        )
        assert len(extractor.extract("trips to Paris, to Rome, to Berlin")) == 2

    def test_statuses_assigned(self, extractor):
        """Every entity carries a verification status."""
        entities = extractor.extract("we met President Joe Biden in Ohio")
        assert entities
        assert all(e.verification_status == VerificationStatus.VERIFIED for e in entities)
