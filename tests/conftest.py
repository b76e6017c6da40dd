import pytest
import os
import sys
import tempfile

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="nav_handoff_logs_"))

from config import config
from repositories.user_repository import InMemoryUserRepository
from services.navigation import NavController


@pytest.fixture
def nav():
    controller = NavController()
    controller.register(config.Routes.HOME)
    controller.register(config.Routes.COLOR_PICKER)
    controller.register(config.Routes.USER_LIST)
    controller.register(config.Routes.USER_DETAIL, {config.Keys.USER_ID_ARG: int})
    return controller


@pytest.fixture
def fast_repository():
    # No simulated latency
    return InMemoryUserRepository(delay=0)
