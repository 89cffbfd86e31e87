"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``casework.toml`` only holds
overrides. A site with the standard layout needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel


class ContentConfig(BaseModel):
    """[content] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the site root.
    directory: str = "content/case-studies"
    extension: str = ".mdx"
    unique_slugs: bool = True


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    name: str = "Pinnacle Technologies LLC"
    contact_endpoint: str = "https://formspree.io/f/your-form-id"
