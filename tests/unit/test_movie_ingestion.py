"""Unit tests for movie-list CSV parsing."""

import pytest

from app.services.movie_ingestion_service import parse_movie_csv


SAMPLE_CSV = """year;title;studios;producers;winner
1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes
1984;Where the Boys Are '84;TriStar Pictures;Allan Carr;
1990;Ghosts Can't Do It;Triumph Releasing;Bo Derek;YES
"""


class TestParseMovieCsv:
    """Tests for parse_movie_csv()."""

    def test_parses_rows(self):
        rows = parse_movie_csv(SAMPLE_CSV)
        assert len(rows) == 3
        first = rows[0]
        assert first.year == 1980
        assert first.title == "Can't Stop the Music"
        assert first.studios == "Associated Film Distribution"
        assert first.producers == "Allan Carr"
        assert first.winner is True

    def test_winner_only_when_yes(self):
        rows = parse_movie_csv(SAMPLE_CSV)
        assert [r.winner for r in rows] == [True, False, True]

    def test_trims_cells_and_skips_blank_lines(self):
        content = (
            "year;title;studios;producers;winner\n"
            "\n"
            " 1986 ; Howard the Duck ;Universal Studios; Gloria Katz ; yes \n"
            ";;;;\n"
        )
        rows = parse_movie_csv(content)
        assert len(rows) == 1
        assert rows[0].year == 1986
        assert rows[0].title == "Howard the Duck"
        assert rows[0].producers == "Gloria Katz"
        assert rows[0].winner is True

    def test_commas_inside_cells_are_kept(self):
        content = (
            "year;title;studios;producers;winner\n"
            "1995;Showgirls;MGM, United Artists;Charles Evans and Alan Marshall;yes\n"
        )
        rows = parse_movie_csv(content)
        assert rows[0].studios == "MGM, United Artists"

    def test_header_only_gives_no_rows(self):
        assert parse_movie_csv("year;title;studios;producers;winner\n") == []

    def test_invalid_year_raises(self):
        content = "year;title;studios;producers;winner\nnineteen;Title;Studio;Someone;yes\n"
        with pytest.raises(ValueError, match="Invalid year"):
            parse_movie_csv(content)

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="missing columns: winner"):
            parse_movie_csv("year;title;studios;producers\n1980;T;S;P\n")

    def test_shipped_movie_list_parses(self, sample_csv_path):
        rows = parse_movie_csv(sample_csv_path.read_text(encoding="utf-8"))
        assert len(rows) == 44
        assert sum(r.winner for r in rows) == 38
