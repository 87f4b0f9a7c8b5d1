"""Desktop calculator with a decimal state-machine core."""
