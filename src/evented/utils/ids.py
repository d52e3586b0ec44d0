"""Identity token utilities."""

import itertools

_counter = itertools.count(1)


def unique_id(prefix: str = "") -> str:
    """Return a process-wide unique token such as ``l1``, ``l2``.

    Used to give an emitter a stable identity the first time something
    listens to it.
    """
    return f"{prefix}{next(_counter)}"
