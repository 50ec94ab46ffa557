#!/usr/bin/env python
#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests of console scripts."""
import unittest
from unittest.mock import patch
import io
import logging
import pathlib
import shutil
import sys
import tempfile

import xsdzod
from xsdzod.cli import get_loglevel, get_parser, main

TEST_CASES_DIR = pathlib.Path(__file__).absolute().parent.joinpath('test_cases')


class TestConsoleScripts(unittest.TestCase):
    ctx = None

    def run_main(self, *args):
        with patch.object(sys, 'argv', ['xsd-zod'] + list(args)):
            with self.assertRaises(SystemExit) as self.ctx:
                main()

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.work_dir = pathlib.Path(self.tmpdir.name)
        self.library_xsd = self.work_dir.joinpath('library.xsd')
        shutil.copy(TEST_CASES_DIR.joinpath('library/library.xsd'), self.library_xsd)
        self.output_dir = self.work_dir.joinpath('out')

    def tearDown(self):
        self.tmpdir.cleanup()

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_missing_input(self, mock_out, mock_err):
        self.run_main()
        self.assertEqual(mock_out.getvalue(), '')
        self.assertIn("the following arguments are required", mock_err.getvalue())
        self.assertEqual('2', str(self.ctx.exception))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_version(self, mock_out, mock_err):
        self.run_main('--version')
        self.assertEqual(mock_err.getvalue(), '')
        self.assertIn(xsdzod.__version__, mock_out.getvalue())
        self.assertEqual('0', str(self.ctx.exception))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_separate_files(self, mock_out, mock_err):
        self.run_main(str(self.library_xsd), '-o', str(self.output_dir))
        self.assertEqual(mock_err.getvalue(), '')
        self.assertEqual('0', str(self.ctx.exception))

        output = mock_out.getvalue()
        self.assertIn(f"generated {self.output_dir.joinpath('library.types.ts')} and "
                      f"{self.output_dir.joinpath('library.validators.ts')} from "
                      f"{str(self.library_xsd)!r}\n", output)
        self.assertTrue(output.endswith("generated files from 1 XSD file(s)\n"))
        self.assertTrue(self.output_dir.joinpath('library.types.ts').is_file())
        self.assertTrue(self.output_dir.joinpath('library.validators.ts').is_file())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_combined_file(self, mock_out, mock_err):
        self.run_main(str(self.work_dir), '--output', str(self.output_dir),
                      '--combined', '--naming', 'kebab')
        self.assertEqual(mock_err.getvalue(), '')
        self.assertEqual('0', str(self.ctx.exception))

        output_file = self.output_dir.joinpath('library.ts')
        self.assertIn(f"generated {output_file} from", mock_out.getvalue())
        self.assertIn("  'first-name': string,\n", output_file.read_text(encoding='utf-8'))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_no_xsd_files(self, mock_out, mock_err):
        empty_dir = self.work_dir.joinpath('empty')
        empty_dir.mkdir()

        self.run_main(str(empty_dir), '-o', str(self.output_dir))
        self.assertEqual(mock_out.getvalue(), '')
        self.assertEqual(mock_err.getvalue(), f"Error: No XSD files found in {empty_dir}\n")
        self.assertEqual('1', str(self.ctx.exception))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_malformed_xsd_file(self, mock_out, mock_err):
        self.library_xsd.write_text('<xs:schema', encoding='utf-8')

        self.run_main(str(self.library_xsd), '-o', str(self.output_dir))
        self.assertEqual(mock_out.getvalue(), '')
        self.assertIn("Error: ", mock_err.getvalue())
        self.assertEqual('1', str(self.ctx.exception))

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_invalid_naming(self, mock_out, mock_err):
        self.run_main(str(self.library_xsd), '-n', 'snake')
        self.assertEqual(mock_out.getvalue(), '')
        self.assertIn("invalid choice: 'snake'", mock_err.getvalue())
        self.assertEqual('2', str(self.ctx.exception))

    def test_get_parser(self):
        args = get_parser().parse_args(['schemas/'])
        self.assertEqual(args.input, 'schemas/')
        self.assertEqual(args.output, './generated')
        self.assertEqual(args.naming, 'camel')
        self.assertTrue(args.separate)
        self.assertEqual(args.verbosity, 0)

        args = get_parser().parse_args(['-c', '-s', '-vv', 'schemas/'])
        self.assertTrue(args.separate)
        self.assertEqual(args.verbosity, 2)

    def test_get_loglevel(self):
        self.assertEqual(get_loglevel(0), logging.ERROR)
        self.assertEqual(get_loglevel(1), logging.WARNING)
        self.assertEqual(get_loglevel(2), logging.INFO)
        self.assertEqual(get_loglevel(3), logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
