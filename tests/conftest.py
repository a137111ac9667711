"""Pytest configuration and shared fixtures for the mdxtree test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=300, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=100)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary working directory for config and I/O tests.

    Yields
    ------
    Path
        Temporary directory that is also the current working directory
        for the duration of the test.

    """
    previous = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(previous)


@pytest.fixture
def sample_mdx() -> str:
    """Provide a document that exercises every block kind.

    Returns
    -------
    str
        MDX markup with headings, marks, nested lists, code and both media embeds.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Lists

- First item
  - Nested **bold** item
  - Another nested item
- Second item

1. One
2. Two

```python
def hello_world():
    print("Hello, World!")
```

<ImageFigure src="https://example.com/diagram.png" alt="Diagram" caption="How it fits together" width={640} />

<VideoEmbed src="https://www.youtube.com/watch?v=dQw4w9WgXcQ" title="Walkthrough" />

#### Closing

Thanks for reading."""


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo the handlers and levels installed by the CLI during a test."""
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("mdxtree")
    level = root_logger.level
    package_level = package_logger.level
    try:
        yield
    finally:
        for handler in list(root_logger.handlers):
            if type(handler) in (logging.StreamHandler, logging.FileHandler):
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level)
        package_logger.setLevel(package_level)
