"""
ncrconv test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

import ncrconv


class CountingTables:
    """Table provider that counts fetches."""

    def __init__(self, provider=None):
        self.provider = provider or ncrconv.default_tables()
        self.fetches = []

    def fetch(self, name):
        self.fetches.append(name)
        return self.provider.fetch(name)


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        # site charset utf-8, codec registry available
        self.transcoder = ncrconv.Transcoder()
        # site charset utf-8, conversion tables only
        self.tables_only = ncrconv.Transcoder(native=None)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()
