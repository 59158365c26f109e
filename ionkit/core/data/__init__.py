"""
Bundled data catalogs.

    fingerprints.yml — how each project type is recognized on disk
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent
