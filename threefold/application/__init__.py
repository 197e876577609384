"""
Application layer.

Use cases orchestrate domain services and talk to infrastructure only through
the protocols declared in each context's ``protocols`` package.
"""
