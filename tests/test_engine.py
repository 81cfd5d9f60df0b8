import unicodedata

import pytest

from catalog.engine import collation_key, filter_entries, process, sort_entries
from catalog.models import Entry, SortOrder
from catalog.state import CatalogState


def make_entry(name, year=2000, pop=1, description="", tags=()):
    return Entry(
        name=name,
        description=description,
        tags=tuple(tags),
        creation_year=year,
        popularity=pop,
        link=f"https://example.com/{name.lower()}",
    )


@pytest.fixture
def alpha_beta():
    return [make_entry("Alpha", year=2010, pop=5), make_entry("Beta", year=2020, pop=1)]


@pytest.fixture
def sample_entries():
    return [
        make_entry("Python", 1991, 98, "Linguagem de alto nível", ["linguagem", "backend"]),
        make_entry("React", 2013, 92, "Biblioteca de interfaces", ["frontend", "web"]),
        make_entry("Django", 2005, 80, "Framework web em Python", ["backend", "framework"]),
        make_entry("Docker", 2013, 90, "Contêineres", ["devops"]),
        make_entry("Git", 2005, 96, "Controle de versão", ["ferramenta"]),
        make_entry("Rust", 2010, 75, "Segurança de memória", ["linguagem", "sistemas"]),
    ]


class TestScenarios:
    """Fixed input/output scenarios."""

    def test_name_ascending(self, alpha_beta):
        """Alpha sorts before Beta by name."""
        result = process(alpha_beta, CatalogState(sort_order="alfa_asc"))
        assert [e.name for e in result] == ["Alpha", "Beta"]

    def test_popularity_descending(self, alpha_beta):
        """Alpha (5) comes before Beta (1) by popularity, descending."""
        result = process(alpha_beta, CatalogState(sort_order="pop_desc"))
        assert [e.name for e in result] == ["Alpha", "Beta"]

    def test_year_descending(self, alpha_beta):
        """Newest first."""
        result = process(alpha_beta, CatalogState(sort_order="ano_desc"))
        assert [e.name for e in result] == ["Beta", "Alpha"]

    def test_default_state(self, sample_entries):
        """Initial state: no filter, alphabetical ascending."""
        state = CatalogState()
        assert state.search_term == ""
        assert state.sort_order == SortOrder.ALFA_ASC.value
        result = process(sample_entries, state)
        assert [e.name for e in result] == ["Django", "Docker", "Git", "Python", "React", "Rust"]


class TestFilter:
    """Search-term filtering."""

    def test_empty_term_keeps_everything(self, sample_entries):
        """Empty term is a no-op: same elements come back."""
        result = process(sample_entries, CatalogState(search_term=""))
        assert sorted(e.name for e in result) == sorted(e.name for e in sample_entries)
        assert len(result) == len(sample_entries)

    @pytest.mark.parametrize("term", ["py", "WEB", "linguagem", "ão", "zzz", " "])
    def test_keeps_exactly_matching_entries(self, sample_entries, term):
        """Every kept entry matches; every matching entry is kept."""
        t = term.lower()

        def matches(e):
            return t in e.name.lower() or t in e.description.lower() or any(t in tag.lower() for tag in e.tags)

        result = filter_entries(sample_entries, term)
        assert all(matches(e) for e in result)
        assert [e for e in sample_entries if matches(e)] == result

    def test_matches_name_case_insensitive(self, sample_entries):
        """'PYTHON' matches the Python entry by name and Django by description."""
        result = process(sample_entries, CatalogState(search_term="PYTHON"))
        assert {e.name for e in result} == {"Python", "Django"}

    def test_matches_tag(self, sample_entries):
        """A tag substring is enough to match."""
        result = process(sample_entries, CatalogState(search_term="devo"))
        assert [e.name for e in result] == ["Docker"]

    def test_no_match(self, sample_entries):
        """A term found nowhere yields an empty list."""
        assert process(sample_entries, CatalogState(search_term="zzz")) == []

    def test_whitespace_term_is_not_trimmed(self, sample_entries):
        """A term of spaces is still a search term."""
        result = process(sample_entries, CatalogState(search_term="de "))
        assert all("de " in e.description.lower() for e in result)
        assert {e.name for e in result} == {"Python", "React", "Git", "Rust"}


class TestSort:
    """Each sort order is monotonic and stable."""

    @pytest.mark.parametrize(
        "order, key, descending",
        [
            ("alfa_asc", lambda e: collation_key(e.name), False),
            ("alfa_desc", lambda e: collation_key(e.name), True),
            ("ano_desc", lambda e: e.creation_year, True),
            ("ano_asc", lambda e: e.creation_year, False),
            ("pop_desc", lambda e: e.popularity, True),
            ("pop_asc", lambda e: e.popularity, False),
        ],
    )
    def test_monotonic(self, sample_entries, order, key, descending):
        """Keys never go the wrong way."""
        keys = [key(e) for e in process(sample_entries, CatalogState(sort_order=order))]
        pairs = list(zip(keys, keys[1:]))
        if descending:
            assert all(a >= b for a, b in pairs)
        else:
            assert all(a <= b for a, b in pairs)

    @pytest.mark.parametrize("order", ["ano_asc", "ano_desc"])
    def test_stable_on_ties(self, sample_entries, order):
        """React and Docker (2013), Django and Git (2005) keep their source order."""
        names = [e.name for e in sort_entries(sample_entries, order)]
        assert names.index("React") < names.index("Docker")
        assert names.index("Django") < names.index("Git")

    @pytest.mark.parametrize("order", ["pop_asc", "pop_desc"])
    def test_stable_on_equal_popularity(self, order):
        """Equal popularity keeps source order in both directions."""
        entries = [make_entry("C", pop=3), make_entry("A", pop=3), make_entry("B", pop=3)]
        assert [e.name for e in sort_entries(entries, order)] == ["C", "A", "B"]

    @pytest.mark.parametrize("order", ["alfa_asc", "alfa_desc"])
    def test_stable_on_equal_names(self, order):
        """Entries with the same name keep source order in both directions."""
        entries = [make_entry("Go", year=1), make_entry("Go", year=2), make_entry("Go", year=3)]
        assert [e.creation_year for e in sort_entries(entries, order)] == [1, 2, 3]

    @pytest.mark.parametrize("order", ["alfa_asc", "alfa_desc"])
    def test_composed_and_decomposed_names_tie(self, order):
        """'Café' spelled with a combining accent sorts as the same name."""
        composed = unicodedata.normalize("NFC", "Café")
        decomposed = unicodedata.normalize("NFD", "Café")
        assert composed != decomposed
        entries = [make_entry(composed, year=1), make_entry(decomposed, year=2)]
        assert [e.creation_year for e in sort_entries(entries, order)] == [1, 2]
        assert collation_key(composed) == collation_key(decomposed)

    def test_accent_aware_collation(self):
        """Accented names sort with their base letters, not after 'Z'."""
        entries = [make_entry("Banana"), make_entry("Zebra"), make_entry("Ágil"), make_entry("Abacaxi")]
        names = [e.name for e in sort_entries(entries, "alfa_asc")]
        assert names == ["Abacaxi", "Ágil", "Banana", "Zebra"]

    def test_case_insensitive_collation(self):
        """Lowercase names are not pushed after uppercase ones."""
        entries = [make_entry("beta"), make_entry("Alpha"), make_entry("Gamma")]
        names = [e.name for e in sort_entries(entries, "alfa_asc")]
        assert names == ["Alpha", "beta", "Gamma"]

    def test_name_descending(self):
        """Z-A is the reverse of A-Z when names are distinct."""
        entries = [make_entry("Banana"), make_entry("Ágil"), make_entry("Zebra")]
        names = [e.name for e in sort_entries(entries, "alfa_desc")]
        assert names == ["Zebra", "Banana", "Ágil"]

    def test_unknown_order_keeps_source_order(self, sample_entries, caplog):
        """An unknown order is tolerated and logged."""
        with caplog.at_level("WARNING", logger="catalog.engine"):
            result = process(sample_entries, CatalogState(sort_order="bogus"))
        assert result == sample_entries
        assert "bogus" in caplog.text


class TestPurity:
    """The engine never touches its input."""

    def test_input_not_mutated(self, sample_entries):
        """Sorting returns a new list and leaves the source order alone."""
        original = list(sample_entries)
        result = process(sample_entries, CatalogState(sort_order="pop_asc"))
        assert sample_entries == original
        assert result is not sample_entries

    def test_identity_still_copies(self, sample_entries):
        """Even a no-op pass returns a fresh list."""
        result = process(sample_entries, CatalogState(sort_order="bogus"))
        assert result == sample_entries
        assert result is not sample_entries

    @pytest.mark.parametrize("order", [o.value for o in SortOrder])
    @pytest.mark.parametrize("term", ["", "e", "linguagem"])
    def test_idempotent(self, sample_entries, order, term):
        """Running the pipeline twice gives the same result as once."""
        state = CatalogState(search_term=term, sort_order=order)
        once = process(sample_entries, state)
        assert process(once, state) == once
