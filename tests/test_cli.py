"""
Tests for the exprscan command line front end.
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprscan.cli import main, format_token, token_to_dict
from exprscan.lexer.lexer import scan


class TestCommandLine(unittest.TestCase):
    """Run main() with captured output."""

    def setUp(self):
        with tempfile.NamedTemporaryFile('w', suffix='.ex', delete=False, encoding='utf-8') as f:
            f.write('fun(n){ "hi" }\n')
            self.good_path = f.name
        with tempfile.NamedTemporaryFile('w', suffix='.ex', delete=False, encoding='utf-8') as f:
            f.write('x 15x\n')
            self.bad_path = f.name

    def tearDown(self):
        os.unlink(self.good_path)
        os.unlink(self.bad_path)

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as ctx:
                main(argv)
        return ctx.exception.code, stdout.getvalue(), stderr.getvalue()

    def test_plain_dump(self):
        code, out, err = self._run([self.good_path])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 7)
        self.assertTrue(lines[0].endswith("FUN"))
        self.assertIn("STRING 'hi'", out)
        self.assertEqual(err, "")

    def test_json_dump(self):
        code, out, _ = self._run([self.good_path, '--json'])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual([item['type'] for item in data], [
            'FUN', 'OPAREN', 'NAME', 'CPAREN', 'OBRACE', 'STRING', 'CBRACE',
        ])
        self.assertEqual(data[2]['value'], 'n')

    def test_lexing_failure(self):
        code, out, err = self._run([self.bad_path])
        self.assertEqual(code, 1)
        self.assertIn("INVALID", out)
        self.assertIn("L004", err)

    def test_strict_suppresses_tokens(self):
        code, out, err = self._run([self.bad_path, '--strict'])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Invalid numeric literal", err)

    def test_missing_file(self):
        code, _, err = self._run([self.good_path + '.missing'])
        self.assertEqual(code, 1)
        self.assertIn("Error reading file", err)

    def test_json_with_out_of_range_numbers(self):
        """Overflowing floats and huge ints are written as valid JSON."""
        huge_float = "9" * 400 + ".5"
        huge_int = "7" * 5000
        with mock.patch('sys.stdin', io.StringIO(f"{huge_float} {huge_int} 2.5")):
            code, out, _ = self._run(['--json'])
        self.assertEqual(code, 0)
        self.assertNotIn("Infinity", out)
        data = json.loads(out)
        self.assertEqual([item['value'] for item in data], [huge_float, huge_int, 2.5])

    def test_text_dump_with_huge_int(self):
        huge_int = "7" * 5000
        with mock.patch('sys.stdin', io.StringIO(huge_int)):
            code, out, _ = self._run([])
        self.assertEqual(code, 0)
        self.assertIn("INT '" + huge_int + "'", out)

    def test_stdin(self):
        with mock.patch('sys.stdin', io.StringIO('def x')):
            code, out, _ = self._run([])
        self.assertEqual(code, 0)
        self.assertIn("DEF", out)
        self.assertIn("NAME 'x'", out)


class TestFormatting(unittest.TestCase):

    def test_format_token(self):
        token = scan("  42")[0]
        self.assertEqual(format_token(token), "1:3      INT 42")

    def test_token_to_dict(self):
        token = scan("(")[0]
        self.assertEqual(token_to_dict(token), {
            'type': 'OPAREN',
            'lexeme': '(',
            'value': None,
            'line': 1,
            'column': 1,
            'offset': 0,
        })


if __name__ == '__main__':
    unittest.main()
