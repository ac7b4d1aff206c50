"""
Shared pytest fixtures for the WordGrade test suite.

This module provides common fixtures used across test modules:
- Project paths
- Configuration settings
- Sample prose at different reading levels

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
from typing import List
import sys

# Ensure wordgrade is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordgrade.config import settings
from wordgrade.config._loader import clear_config_cache


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture
def readability_settings():
    """Return the global readability configuration."""
    return settings.readability


@pytest.fixture
def fresh_config_cache():
    """Clear cached YAML before and after a test that changes configuration."""
    clear_config_cache()
    yield
    clear_config_cache()


# ===========================
# Sample Text Fixtures
# ===========================

@pytest.fixture(scope="session")
def graded_samples() -> List[str]:
    """
    Prose samples ordered from very easy to very hard.

    Used by validation tests that compare scores across reading levels.
    """
    return [
        (
            "The dog ran. The cat sat on a mat. We had fun in the sun. "
            "Tom has a red hat. It is a big day for us. Mom made a cake. "
            "We ate it all up. Then we went to bed."
        ),
        (
            "My friend and I went to the park on Sunday. We saw a big kite "
            "fly high in the blue sky. After lunch we played ball with my "
            "little brother. It was a warm and happy day for all of us."
        ),
        (
            "The city council met on Tuesday to discuss the new library. "
            "Several residents spoke about parking problems near the site. "
            "The mayor said the building should open next spring if the "
            "weather stays mild and the budget holds."
        ),
        (
            "Researchers have observed that regular physical activity improves "
            "concentration and memory in adolescents. The study followed four "
            "hundred students over two academic years and measured their "
            "performance on standardized examinations."
        ),
        (
            "Notwithstanding the aforementioned considerations, the organization's "
            "comprehensive implementation strategy necessitates substantial "
            "modifications to existing administrative infrastructure, particularly "
            "regarding interdepartmental communication and accountability mechanisms."
        ),
        (
            "The epistemological ramifications of contemporary computational "
            "methodologies, particularly those incorporating probabilistic "
            "inferential architectures, fundamentally necessitate a reconsideration "
            "of traditional philosophical conceptualizations regarding "
            "deterministic explanation and institutional responsibility."
        ),
    ]
