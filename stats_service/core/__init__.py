"""Domain core: exception hierarchy shared by every layer."""
