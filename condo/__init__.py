"""Condo: multi-tenant condominium management backend (auth, sessions, cache-aside entities)."""
