from prodreg.extensions import db
from prodreg.models import Product, Registration, User


class TestDemoSeed:

    def test_seed_loads_demo_dataset(self, app, db_session):
        runner = app.test_cli_runner()
        result = runner.invoke(args=["demo", "seed"])
        assert result.exit_code == 0
        assert "PASS registrations: 13 created" in result.output
        assert db.session.query(User).count() == 6
        assert db.session.query(Product).count() == 6

    def test_seed_is_idempotent(self, app, db_session):
        runner = app.test_cli_runner()
        runner.invoke(args=["demo", "seed"])
        result = runner.invoke(args=["demo", "seed"])
        assert result.exit_code == 0
        assert "PASS registrations: 0 created" in result.output
        assert db.session.query(Registration).count() == 13


class TestReportsCommand:

    def test_top_users(self, app, demo_data):
        result = app.test_cli_runner().invoke(args=["reports", "top", "--dimension", "user", "--limit", "2"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 2
        assert "Tom Peckstadt" in lines[0]
        assert lines[0].rstrip().endswith("6")

    def test_empty_history(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["reports", "top"])
        assert result.exit_code == 0
        assert "No registrations found." in result.output

    def test_bad_limit(self, app, db_session):
        result = app.test_cli_runner().invoke(args=["reports", "top", "--limit", "0"])
        assert result.exit_code != 0
        assert "limit must be between 1 and 100" in result.output
