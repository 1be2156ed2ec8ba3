"""
Tests for the migration runner and the seed script.
"""

from unittest.mock import MagicMock

import psycopg2
import pytest

import run_migrations
import run_seed
from api.dependencies import ServiceContainer
from run_migrations import Migration, MigrationRunner, load_migrations, split_pending
from shared.roles import Role


class TestLoadMigrations:
    def test_bundled_accounts_migration(self):
        names = [m.name for m in load_migrations()]
        assert names[0] == "001_create_accounts.sql"

    def test_accounts_email_is_unique(self):
        content = (run_migrations.MIGRATIONS_DIR / "001_create_accounts.sql").read_text()
        assert "CITEXT" in content
        assert "UNIQUE (email)" in content

    def test_sorted_and_checksummed(self, tmp_path):
        (tmp_path / "002_b.sql").write_text("SELECT 2;")
        (tmp_path / "001_a.sql").write_text("SELECT 1;")
        (tmp_path / "notes.txt").write_text("ignored")

        migrations = load_migrations(tmp_path)

        assert [m.name for m in migrations] == ["001_a.sql", "002_b.sql"]
        assert migrations[0].checksum != migrations[1].checksum
        assert len(migrations[0].checksum) == 16

    def test_missing_directory(self, tmp_path):
        assert load_migrations(tmp_path / "nope") == []


class TestSplitPending:
    def test_pending_and_changed(self, tmp_path):
        a = Migration("001_a.sql", tmp_path / "001_a.sql", "aaaa")
        b = Migration("002_b.sql", tmp_path / "002_b.sql", "bbbb")
        c = Migration("003_c.sql", tmp_path / "003_c.sql", "cccc")

        pending, changed = split_pending([a, b, c], {"001_a.sql": "aaaa", "002_b.sql": "old"})

        assert pending == [c]
        assert changed == [b]


class TestMigrationRunner:
    @pytest.fixture
    def conn(self):
        return MagicMock()

    def test_apply_records_migration(self, conn, tmp_path):
        path = tmp_path / "001_a.sql"
        path.write_text("CREATE TABLE t (id int);")
        cursor = conn.cursor.return_value.__enter__.return_value

        MigrationRunner(conn).apply(Migration("001_a.sql", path, "abcd"))

        assert cursor.execute.call_args_list[0].args[0] == "CREATE TABLE t (id int);"
        assert cursor.execute.call_args_list[1].args[1] == ("001_a.sql", "abcd")
        conn.commit.assert_called_once()

    def test_failed_migration_rolls_back(self, conn, tmp_path):
        path = tmp_path / "001_a.sql"
        path.write_text("BROKEN;")
        cursor = conn.cursor.return_value.__enter__.return_value
        cursor.execute.side_effect = psycopg2.Error("syntax error")

        with pytest.raises(psycopg2.Error):
            MigrationRunner(conn).apply(Migration("001_a.sql", path, "abcd"))

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()

    def test_applied(self, conn):
        cursor = conn.cursor.return_value.__enter__.return_value
        cursor.fetchall.return_value = [("001_a.sql", "abcd", None)]

        assert MigrationRunner(conn).applied() == {"001_a.sql": ("abcd", None)}


class TestSeed:
    def test_plan(self):
        plan = run_seed.seed_plan(admins=2, users=3)

        assert len(plan) == 6
        assert plan[0][1] == "admin@example.com"
        assert [p[3] for p in plan].count(Role.ADMIN) == 3

    @pytest.mark.asyncio
    async def test_seed_is_repeatable(self, settings):
        container = ServiceContainer(settings)
        plan = run_seed.seed_plan(admins=1, users=2)

        await run_seed.seed(container, plan)
        await run_seed.seed(container, plan)

        assert len(container.directory) == 4
        result = await container.credentials.sign_in("admin@example.com", "admin123")
        assert result.account.role == Role.ADMIN
