"""
Data access layer.

Each service wraps one ``Database`` handle, given to it by the caller,
and exposes one coroutine per use case.
"""
