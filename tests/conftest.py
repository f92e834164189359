import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wedding_site.core.config import Settings
from wedding_site.main import create_app

TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>Old</title>
</head>
<body><h1>Our wedding</h1></body>
</html>
"""


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A minimal site: template, config folder and favicon folder (no photos)."""
    (tmp_path / "index.html").write_text(TEMPLATE, encoding="utf-8")
    (tmp_path / "config").mkdir()
    (tmp_path / "favicon").mkdir()
    return tmp_path


@pytest.fixture
def write_config(site_root: Path):
    def _write(data) -> Path:
        path = site_root / "config" / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def photo_dir(site_root: Path) -> Path:
    path = site_root / "config" / "photos"
    path.mkdir()
    return path


@pytest.fixture
def settings(site_root: Path) -> Settings:
    return Settings(site_root=site_root, log_level="info")


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c
