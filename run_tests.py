#!/usr/bin/env python3
"""
Main test runner for the exprscan test suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Discover and run every test module under tests/."""

    print("exprscan Test Suite")
    print("=" * 60)

    try:
        from exprscan.lexer import Lexer
    except ImportError as e:
        print(f"Failed to import exprscan: {e}")
        return False

    tokens = Lexer('fun(n){ "hi" } // smoke test').tokenize()
    print(f"Smoke test produced {len(tokens)} tokens")
    print()

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print()
    print("=" * 60)
    print(f"Ran {result.testsRun} tests: "
          f"{len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
