"""
pytest configuration and fixtures.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from eventroute import Router, RouterConfig
from eventroute import app


# 1x1 transparent PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def router() -> Router:
    """Router without the logging filter, so tests control the chain."""
    return Router(install_default_filters=False)


@pytest.fixture
def logging_router() -> Router:
    """Router with the default after-filters installed."""
    return Router()


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Directory of static files."""
    public = tmp_path / "public"
    (public / "css").mkdir(parents=True)
    (public / "logo.png").write_bytes(PNG_BYTES)
    (public / "css" / "site.css").write_text("body { color: red; }\n")
    (public / "notes.unknownext").write_bytes(b"opaque")
    (tmp_path / "secret.txt").write_text("outside the root")
    return public


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Directory of named templates."""
    views = tmp_path / "views"
    views.mkdir()
    (views / "index.html").write_text("<h1>Index</h1>", encoding="utf-8")
    (views / "feed.xml").write_text("<feed/>", encoding="utf-8")
    return views


@pytest.fixture
def default_app() -> Generator[Router, None, None]:
    """Fresh process-wide router, torn down after the test."""
    app.init(RouterConfig())
    yield app.router()
    app.teardown()


@pytest.fixture
def access_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture the access logger at INFO."""
    caplog.set_level(logging.INFO, logger="eventroute.access")
    return caplog
