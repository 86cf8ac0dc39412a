from __future__ import annotations

"""
ProjectLister: recursive project-tree enumeration for solution models.
"""

from projectlister.core.formatter import OutputFormatter
from projectlister.core.report import build_report
from projectlister.core.walker import ProjectTreeWalker, enumerate_projects
from projectlister.domain.constants import APP_VERSION as __version__
from projectlister.domain.models import (
    ActiveDocumentInfo,
    ProjectEntry,
    ProjectKind,
    ProjectNode,
)


__all__ = [
    "ActiveDocumentInfo",
    "OutputFormatter",
    "ProjectEntry",
    "ProjectKind",
    "ProjectNode",
    "ProjectTreeWalker",
    "build_report",
    "enumerate_projects",
]
