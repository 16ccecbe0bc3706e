"""UI automation: framework, page objects, features and BDD step definitions."""
