"""Core domain, ports and use cases."""
