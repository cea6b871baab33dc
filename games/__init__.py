"""Games built on the Love Catch framework."""
