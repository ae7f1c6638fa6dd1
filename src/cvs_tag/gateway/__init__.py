"""Gateways wrapping the I/O performed by the tagging step."""
