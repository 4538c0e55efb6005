from __future__ import annotations

import io
import json
import logging
import unittest
from unittest.mock import patch

from rcat.logging import get_logger, setup_base_logger, trace_io


class BaseLoggerTests(unittest.TestCase):
    """The 'rcat' logger keeps a single stderr handler across reconfiguration."""

    def setUp(self) -> None:
        self.base = logging.getLogger('rcat')
        self._saved = (self.base.handlers[:], self.base.level, self.base.propagate)
        self.base.handlers = []
        self.buf = io.StringIO()

    def tearDown(self) -> None:
        handlers, level, propagate = self._saved
        self.base.handlers = handlers
        self.base.setLevel(level)
        self.base.propagate = propagate

    def test_plain_format(self) -> None:
        setup_base_logger(stream=self.buf)
        get_logger('session').error('%s: %s', 'a.txt', 'No such file or directory')
        self.assertEqual(self.buf.getvalue(), 'rcat: a.txt: No such file or directory\n')

    def test_switching_to_json_reuses_the_handler(self) -> None:
        setup_base_logger(stream=self.buf)
        setup_base_logger(json_logs=True, stream=self.buf)
        self.assertEqual(len(self.base.handlers), 1)

        get_logger('session').warning('theme fallback')
        payload = json.loads(self.buf.getvalue().splitlines()[-1])
        self.assertEqual(payload['msg'], 'theme fallback')
        self.assertEqual(payload['level'], 'WARNING')
        self.assertEqual(payload['module'], 'rcat.session')

    def test_switching_back_to_plain(self) -> None:
        setup_base_logger(json_logs=True, stream=self.buf)
        setup_base_logger(json_logs=False)
        get_logger().info('hello')
        self.assertEqual(self.buf.getvalue(), 'rcat: hello\n')

    def test_trace_io_is_opt_in(self) -> None:
        setup_base_logger(level=logging.DEBUG, stream=self.buf)
        log = get_logger('sources')
        with patch.dict('os.environ', {'RCAT_TRACE_IO': '0'}):
            trace_io(log, 'opened source', source='a.txt')
        self.assertEqual(self.buf.getvalue(), '')
        with patch.dict('os.environ', {'RCAT_TRACE_IO': '1'}):
            trace_io(log, 'opened source', source='a.txt')
        self.assertIn('opened source', self.buf.getvalue())
        self.assertIn("'source': 'a.txt'", self.buf.getvalue())


if __name__ == '__main__':
    unittest.main()
