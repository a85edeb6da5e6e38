import logging
import os
import sys
import tempfile
import unittest
from unittest import mock

from simplesum.config import config, reset_config, apply_overrides, dump_config, Section
from simplesum.exceptions import WrongArgumentsError
from simplesum.logger_init import logger_init


class TestConfig(unittest.TestCase):
    """Tests for `simplesum.config`."""

    def setUp(self):
        reset_config()

    def tearDown(self):
        reset_config()

    def test_default_config(self):
        cfg = config()
        assert cfg.log.level == 'INFO'
        assert cfg.log.to_file is False
        assert cfg.log.prefix == 'simplesum_'
        assert config() is cfg

    def test_host_arguments_are_not_read(self):
        with mock.patch.object(sys, 'argv', ['prog', '--tb=short', '--log.to_file=true']):
            cfg = config()
        assert cfg.log.to_file is False

    def test_overrides(self):
        cfg = config(['--log.level=DEBUG', '--log.to_file=True',
                      '--tb=short', '--log.unknown=1', 'positional'])
        assert cfg.log.level == 'DEBUG'
        assert cfg.log.to_file is True
        assert 'unknown' not in cfg.log

        with self.assertRaises(WrongArgumentsError):
            apply_overrides(cfg, ['--log=x'])

        cfg = Section({'batch': {'size': 8}})
        apply_overrides(cfg, ['--batch.size=64'])
        assert cfg.batch.size == 64
        with self.assertRaises(WrongArgumentsError):
            apply_overrides(cfg, ['--batch.size=many'])

    def test_missing_attribute(self):
        cfg = config()
        assert not hasattr(cfg.log, 'unknown')
        assert getattr(cfg, 'unknown', 3) == 3
        with self.assertRaises(KeyError):
            cfg['unknown']

    def test_config_file_argument(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'custom.yaml')
            with open(path, 'w') as f:
                f.write('log:\n  level: WARNING\n')
            cfg = config(['--config=' + path])
            assert cfg.log.level == 'WARNING'

    def test_dump_config(self):
        config()
        with self.assertLogs('simplesum.config', level=logging.DEBUG) as logs:
            dump_config()
        assert any('log.prefix=simplesum_' in line for line in logs.output)

    def test_logger_init_to_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = logging.getLogger()
            handlers = list(root.handlers)
            try:
                filename = logger_init(['--log.to_file=true', '--log.dir=' + tmp])
                new = [h for h in root.handlers if h not in handlers
                       and isinstance(h, logging.FileHandler)]
                assert len(new) == 1
                assert new[0].baseFilename == os.path.abspath(filename)
                assert os.path.basename(filename).startswith('simplesum_')
            finally:
                for h in list(root.handlers):
                    if h not in handlers:
                        root.removeHandler(h)
                        h.close()

    def test_logger_init_stderr_only(self):
        assert logger_init([]) is None
