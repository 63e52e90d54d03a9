"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, folioterm.toml only contains
overrides. A site with the packaged corpus needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from folioterm.domain.types import ThemeName


class ContentConfig(BaseModel):
    """[content] section."""

    model_config = {"frozen": True}

    directory: Path | None = None
    sort: Literal["newest", "file"] = "newest"


class TerminalConfig(BaseModel):
    """[terminal] section."""

    model_config = {"frozen": True}

    prompt: str = "$"
    theme: ThemeName = ThemeName.DARK
    welcome: bool = True


def _default_skills() -> dict[str, list[str]]:
    return {
        "Frontend Development": [
            "JavaScript",
            "React",
            "TypeScript",
            "HTML5/CSS3",
            "Frontend Architecture",
            "UI/UX Design",
        ],
        "Backend & Languages": [
            "Java",
            "Python",
            "Node.js",
            "SQL Server",
            "REST APIs",
            "Socket Programming",
        ],
        "Systems & Infrastructure": [
            "Distributed Systems",
            "Networking",
            "Network Security",
            "SDN/OpenDayLight",
            "Linux",
            "IoT/Raspberry Pi",
        ],
        "Tools & Platforms": ["Git", "Docker", "AWS", "MSSQL", "Mininet", "OpenFlow"],
    }


class ProfileConfig(BaseModel):
    """[profile] section — the biographical pages."""

    model_config = {"frozen": True}

    name: str = "My Portfolio"
    headline: str = "Thoughts, tutorials, and insights from my journey"
    bio: str = ""
    email: str | None = None
    links: dict[str, str] = Field(default_factory=dict)
    skills: dict[str, list[str]] = Field(default_factory=_default_skills)
