"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure edusharing_backend is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from edusharing_backend.interface.context import RequestContext, UserIdentity
from edusharing_backend.interface.edusharing import EdusharingResource
from edusharing_backend.model import Base
from edusharing_backend.settings import EdusharingSettings

from edusharing_backend.tests.fixtures import OBJECT_URL


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def Session(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def session(Session):
    """Create a new database session for a test."""
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(private_key):
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


@pytest.fixture
def edusharing_settings(public_key_pem):
    return EdusharingSettings(
        application_cc_gui_url="https://repo.example.org/edu-sharing",
        application_appid="moodle-app",
        repository_public_key=public_key_pem,
        EDU_AUTH_KEY="username",
        EDU_AUTH_PARAM_NAME_USERID="userid",
    )


@pytest.fixture
def request_context():
    return RequestContext(
        session_id="sess-42",
        user=UserIdentity(
            id=7,
            username="jdoe",
            idnumber="A-100",
            email="jdoe@example.org",
            profile={"matrikel": "0815"},
        ),
        course_id=3,
        roles=["editingteacher", "student"],
        language="de",
    )


@pytest.fixture
def resource():
    return EdusharingResource(
        course=3,
        name="Photosynthesis",
        object_url=OBJECT_URL,
    )
