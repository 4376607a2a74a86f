#-------------------------------------------------------------------------
# pytest configuration and fixtures for fsplit tests
#-------------------------------------------------------------------------

import sys
from pathlib import Path

import pytest

# Add src and tests to path for imports
PROJ_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJ_ROOT / 'src'))
sys.path.insert(0, str(PROJ_ROOT / 'tests'))

from go_fixtures import PassThroughFormatter


@pytest.fixture
def formatter():
    return PassThroughFormatter()


@pytest.fixture
def make_pkg(tmp_path):
    """
    Build a package directory from a {file name: source} mapping.

    Returns a callable; each call creates a new directory under tmp_path.
    """
    def _make(files, name='pkg'):
        pkg_dir = tmp_path / name
        pkg_dir.mkdir()
        for fname, source in files.items():
            (pkg_dir / fname).write_text(source, encoding='utf-8')
        return pkg_dir
    return _make
