"""Ports (Protocols) the application services depend on."""
