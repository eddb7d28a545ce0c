"""Tests for list rank extraction."""

from geo_visibility.adapters.parsing import RankExtractor


class TestRankExtractor:
    """Tests for RankExtractor.extract_rank."""

    def test_numbered_list(self):
        """Numbered lines give 1-based ranks."""
        text = "1. Juleo\n2. Bumble"
        assert RankExtractor(["Juleo"]).extract_rank(text) == 1
        assert RankExtractor(["Bumble"]).extract_rank(text) == 2

    def test_parenthesis_and_hash_markers(self):
        """'2) Name' and '#3 Name' are recognized."""
        assert RankExtractor(["Juleo"]).extract_rank("1) Bumble\n2) Juleo") == 2
        assert RankExtractor(["Juleo"]).extract_rank("#3 Juleo - new app") == 3
        assert RankExtractor(["Juleo"]).extract_rank("#1. Juleo") == 1
        assert RankExtractor(["Juleo"]).extract_rank("(1) Bumble\n(2) Juleo") == 2

    def test_markdown_decoration(self):
        """Bold names, bullets and headings are tolerated."""
        assert RankExtractor(["Juleo"]).extract_rank("1. **Juleo**: verified profiles") == 1
        assert RankExtractor(["Juleo"]).extract_rank("### 4. Juleo") == 4
        assert RankExtractor(["Juleo"]).extract_rank("  - 5. [Juleo](https://juleo.club)") == 5

    def test_first_match_wins(self):
        """The first matching line in document order wins."""
        text = "Top picks:\n3. Juleo\n\nRunners up:\n1. Juleo"
        assert RankExtractor(["Juleo"]).extract_rank(text) == 3

    def test_any_variant(self):
        """Any name variant can carry the rank."""
        assert RankExtractor(["Juleo", "Juleo Club"]).extract_rank("1. Tinder\n2. Juleo Club") == 2

    def test_name_must_follow_marker(self):
        """A mention elsewhere on the line is not a rank."""
        assert RankExtractor(["Juleo"]).extract_rank("1. Bumble is better than Juleo") is None

    def test_word_boundary(self):
        """A longer word starting with the name does not count."""
        assert RankExtractor(["Hinge"]).extract_rank("1. Hinges and doors") is None

    def test_zero_marker_ignored(self):
        """Rank 0 is not a valid position."""
        assert RankExtractor(["Juleo"]).extract_rank("0. Juleo") is None

    def test_no_list(self):
        """Prose without list markers has no rank."""
        assert RankExtractor(["Juleo"]).extract_rank("Juleo is a dating app.") is None
        assert RankExtractor(["Juleo"]).extract_rank("") is None
