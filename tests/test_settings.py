import argparse
import io
import logging
import unittest
from unittest import mock

from vmstarter.settings import setup_logging


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        rootlogger = logging.getLogger()
        self.saved_handlers = rootlogger.handlers[:]
        self.saved_level = rootlogger.level

    def tearDown(self):
        rootlogger = logging.getLogger()
        for handler in rootlogger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        rootlogger.handlers = self.saved_handlers
        rootlogger.setLevel(self.saved_level)

    def test_stdout_mode_splits_levels_between_streams(self):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch('sys.stdout', out), mock.patch('sys.stderr', err):
            setup_logging(argparse.Namespace(log_output='stdout'))
            logger = logging.getLogger('vmstarter.test_settings')
            logger.debug('d')
            logger.info('i')
            logger.warning('w')
            logger.error('e')
        self.assertEqual(out.getvalue().splitlines(), ['[DBG]: d', '[INF]: i'])
        self.assertEqual(err.getvalue().splitlines(), ['[WRN]: w', '[ERR]: e'])

    def test_third_party_loggers_are_quieted(self):
        with mock.patch('sys.stdout', io.StringIO()), mock.patch('sys.stderr', io.StringIO()):
            setup_logging(argparse.Namespace(log_output='stdout'))
        for name in ['azure.identity', 'azure.core.pipeline.policies.http_logging_policy', 'urllib3', 'msal']:
            self.assertEqual(logging.getLogger(name).level, logging.WARN)

    def test_defaulthandler_mode_uses_basic_config(self):
        with mock.patch('logging.basicConfig') as basic_config:
            setup_logging(argparse.Namespace(log_output='defaulthandler'))
        basic_config.assert_called_once_with(encoding='utf-8', level=logging.DEBUG)
