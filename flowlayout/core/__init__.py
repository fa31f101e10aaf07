"""Host-independent flow layout algorithm."""
