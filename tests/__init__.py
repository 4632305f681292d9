"""
This __init__.py file is kept in the root tests directory while the test
subdirectories stay without one.

It makes `tests` importable as a package, so unit tests can share helpers via
`from tests.helpers...` imports. Subdirectories work as namespace packages
(PEP 420).
"""
