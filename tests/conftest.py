import pytest
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

# API tests share one client address; keep the per-IP limits out of their way
os.environ.setdefault('RATELIMIT_ENABLED', 'false')

from liftlog.app import app


@pytest.fixture()
def client():
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client
