"""Unit tests for settings defaults and path handling."""

from pathlib import Path

from app.config import PROJECT_ROOT, Settings


class TestMoviesCsvPath:
    def test_default_points_into_project(self):
        path = Path(Settings().movies_csv_path)
        assert path.is_absolute()
        assert path == PROJECT_ROOT / "data" / "movielist.csv"
        assert path.is_file()

    def test_relative_path_is_anchored_to_project_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        configured = Settings(movies_csv_path="data/movielist.csv")
        assert configured.movies_csv_path == str(PROJECT_ROOT / "data" / "movielist.csv")

    def test_absolute_path_is_kept(self, tmp_path):
        target = tmp_path / "movies.csv"
        assert Settings(movies_csv_path=str(target)).movies_csv_path == str(target)

    def test_empty_value_disables_seeding(self):
        assert Settings(movies_csv_path="").movies_csv_path is None


class TestDatabaseUrl:
    def test_default_is_a_file_inside_project(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        url = Settings().database_url
        assert url.startswith("sqlite+aiosqlite:///")
        assert ":memory:" not in url
        assert url.endswith(str(PROJECT_ROOT / "awards.db"))
