"""Shared fixtures: a throwaway StudySync project root per test."""

from pathlib import Path

import pytest

from studysync.app import App
from studysync.config import AppConfig
from studysync.site import create_app

PAGE_TEMPLATE = "<h1>{{ page }}</h1><p>{{ appName }}|{{ page }}</p>"


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A project root with templates, one pre-rendered page, and assets.

    - ``home.html`` at the root (served as a file)
    - templates for every other allow-listed page except ``login2``
    - ``404.html`` and ``500.html`` error templates
    - ``css/``, ``js/``, ``images/``, ``data/`` with one file each
    """
    root = tmp_path / "site"
    views = root / "views"
    views.mkdir(parents=True)

    for page in ("index", "studysync", "reviewpage", "price", "login"):
        (views / f"{page}.html").write_text(PAGE_TEMPLATE)
    (views / "404.html").write_text("<h1>Not Found</h1><p>{{ appName }}|{{ page }}</p>")
    (views / "500.html").write_text(
        "<h1>Error</h1><p>{{ appName }}|{{ page }}</p><pre>{{ errorMessage }}</pre>"
    )

    (root / "home.html").write_text("<h1>Pre-rendered home</h1>")

    for name in ("css", "js", "images", "data"):
        (root / name).mkdir()
    (root / "css" / "app.css").write_text("body { color: navy; }")
    (root / "js" / "app.js").write_text("console.log('studysync');")
    (root / "images" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "data" / "courses.json").write_text('[{"id": "bio101"}]')

    return root


@pytest.fixture
def config(site_root: Path) -> AppConfig:
    return AppConfig(root_dir=site_root)


@pytest.fixture
def app(config: AppConfig) -> App:
    return create_app(config)
