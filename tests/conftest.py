"""Shared pytest fixtures for casework tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from ruamel.yaml import YAML

from casework.infrastructure.store import CaseStudyStore

WriteStudy = Callable[..., Path]


def study_text(body: str = "Body text.", **overrides: Any) -> str:
    """Render a valid case study document, with *overrides* merged into the front-matter.

    An override of ``None`` removes the key.
    """
    frontmatter: dict[str, Any] = {
        "title": "Test Case Study",
        "slug": "test-study",
        "sector": ["Government", "Healthcare"],
        "platforms": ["Socrata", "CKAN"],
        "services": ["Data Migration"],
        "outcomes": ["Improved data quality"],
        "dates": {"start": "2024-01", "end": "2024-06"},
    }
    for key, value in overrides.items():
        if value is None:
            frontmatter.pop(key, None)
        else:
            frontmatter[key] = value

    buf = StringIO()
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    yaml.dump(frontmatter, buf)
    return f"---\n{buf.getvalue()}---\n{body}"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary site with an empty ``content/case-studies`` directory."""
    (tmp_path / "content" / "case-studies").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def content_dir(site_root: Path) -> Path:
    return site_root / "content" / "case-studies"


@pytest.fixture
def write_study(content_dir: Path) -> WriteStudy:
    """Write a case study file; the slug defaults to the filename stem."""

    def _write(name: str, body: str = "Body text.", **overrides: Any) -> Path:
        overrides.setdefault("slug", name)
        path = content_dir / f"{name}.mdx"
        path.write_text(study_text(body, **overrides), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(content_dir: Path) -> CaseStudyStore:
    return CaseStudyStore(content_dir)


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from inside the temp site, with no ambient config."""
    monkeypatch.chdir(site_root)
    monkeypatch.delenv("CASEWORK_CONFIG", raising=False)
    monkeypatch.delenv("CASEWORK_CONTENT_DIR", raising=False)


@pytest.fixture
def make_text() -> Callable[..., str]:
    """Expose :func:`study_text` to tests that need raw document text."""
    return study_text


@pytest.fixture(autouse=True)
def _telemetry_off() -> Generator[None]:
    """``--verbose`` CLI runs switch telemetry on; switch it back off."""
    yield
    from casework.services.telemetry import disable_telemetry

    disable_telemetry()
