"""
Service layer.

``unicorn_store`` owns the in-memory collection and is its only
mutator; ``query_engine`` filters a snapshot of it.  Neither performs
any I/O, so both can be exercised without the HTTP layer.
"""
