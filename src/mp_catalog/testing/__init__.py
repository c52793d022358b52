"""Testing – in-memory fakes for the catalogue ports."""
