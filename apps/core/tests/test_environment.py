"""Tests for .env loading."""
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from django.test import SimpleTestCase

from config.database import get_database_config
from config.environment import load_env_file


class LoadEnvFileTest(SimpleTestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.base_dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def write_env(self, text):
        (self.base_dir / '.env').write_text(text)

    def test_values_are_picked_up(self):
        self.write_env('APP_ENV=staging\nDATABASE_URL=sqlite:///from-dotenv.db\n')
        with patch.dict(os.environ, {}, clear=True):
            self.assertTrue(load_env_file(self.base_dir))
            self.assertEqual(os.environ['APP_ENV'], 'staging')
            config = get_database_config(self.base_dir)
        self.assertEqual(config['NAME'], self.base_dir / 'from-dotenv.db')

    def test_process_environment_wins(self):
        self.write_env('PORT=4000\n')
        with patch.dict(os.environ, {'PORT': '5000'}, clear=True):
            load_env_file(self.base_dir)
            self.assertEqual(os.environ['PORT'], '5000')

    def test_missing_file_is_fine(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertFalse(load_env_file(self.base_dir))
            self.assertNotIn('APP_ENV', os.environ)
