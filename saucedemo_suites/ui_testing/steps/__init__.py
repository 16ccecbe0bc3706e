"""pytest-bdd step definitions shared by the live and browser-free login runs."""
