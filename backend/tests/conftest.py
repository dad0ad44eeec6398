"""
Pytest fixtures for the product registration backend tests.

Provides the application on an in-memory database, a test client, a
per-test clean session, and the demonstration dataset loaded into it.
"""

import pytest

from prodreg import create_app
from prodreg.extensions import db
from prodreg.services.seed_service import seed_demo_data


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'DEMO_FALLBACK_ENABLED': True,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create fresh database for each test."""
    with app.app_context():
        # Clear all data but keep schema
        meta = db.metadata
        for table in reversed(meta.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        # Cleanup after test
        db.session.rollback()


@pytest.fixture(scope='function')
def demo_data(db_session):
    """Load the demonstration users, products, locations and history."""
    return seed_demo_data()
