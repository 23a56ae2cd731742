"""
Versioned table migrations.

Each `<YYYYMMDDHHMMSS>_<table>.py` module exposes `up(conn)` and `down(conn)`.
`schema.py` discovers, orders and tracks them.
"""
