"""
SauceDemo automation suites.

The package stays importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - pytest-bdd step discovery
"""
