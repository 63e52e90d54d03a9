"""Shared pytest fixtures for folioterm tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from folioterm.domain.post import Post
from folioterm.infrastructure.repository import PostRepository

TAXONOMY_MD = """\
---
id: ai-model-taxonomy-2025
title: "Beyond the Hype: A Developer's Guide to the Modern AI Model Landscape"
date: 2025-12-29
readTime: 5 min
excerpt: "From MoE to Reasoning models, the AI ecosystem is diversifying."
tags: ["AI", "LLM", "SLM", "Machine Learning", "Software Architecture"]
---

The days of "one LLM fits all" are officially over.
"""

REASONING_MD = """\
---
id: "large-reasoning-models"
title: "Thinking Models: The Evolution from 'Autofill' to 'Architect'"
date: "2025-12-29"
readTime: "8 min read"
excerpt: "Exploring the shift from standard LLMs to reasoning models."
tags: ["AI", "Machine Learning", "LLM", "Reasoning Models", "Chain of Thought"]
---

Enter **Reasoning Models**.
"""

CLUSTER_MD = """\
---
id: raspberry-pi-cluster
title: Building a Raspberry Pi Cluster
date: 2024-06-01
readTime: 6 min read
excerpt: Notes from wiring four boards into a tiny Kubernetes lab.
tags: [iot, Linux, ai]
---

Four boards, one switch.
"""


def _make_post(post_id: str, **fields: object) -> Post:
    data: dict[str, object] = {
        "id": post_id,
        "title": post_id.replace("-", " ").title(),
        "date": "2025-01-01",
        "readTime": "3 min",
        "excerpt": "",
        "tags": [],
    }
    data.update(fields)
    return Post.model_validate(data)


@pytest.fixture
def make_post() -> Callable[..., Post]:
    """Factory building a Post with defaults for the fields not given."""
    return _make_post


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A corpus directory with three posts (file names deliberately unsorted by date)."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    (posts_dir / "ai-model-taxonomy-2025.md").write_text(TAXONOMY_MD, encoding="utf-8")
    (posts_dir / "large-reasoning-models.md").write_text(REASONING_MD, encoding="utf-8")
    (posts_dir / "a-cluster.md").write_text(CLUSTER_MD, encoding="utf-8")
    return posts_dir


@pytest.fixture
def repository(content_dir: Path) -> PostRepository:
    """Repository loaded from :func:`content_dir`, newest first.

    Order: ai-model-taxonomy-2025, large-reasoning-models, raspberry-pi-cluster.
    """
    return PostRepository.from_directory(content_dir)


@pytest.fixture
def empty_repository() -> PostRepository:
    return PostRepository([])


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run from an empty directory so no folioterm.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("FOLIOTERM_CONFIG", raising=False)
    for name in ("FOLIOTERM_JSON_OUTPUT", "FOLIOTERM_QUIET", "FOLIOTERM_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    yield
