"""
Per-domain repository modules for database access.

Repositories return ORM objects, ``None`` for missing rows, and booleans for
deletes; routers and services decide how absence is reported.
"""
