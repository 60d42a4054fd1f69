"""Core building blocks: types, HTTP session, credentials."""
