"""Property key namespaces.

Keys starting with an underscore are reserved for the store and for docfork
itself. They are never copied between a document and its fork, with one
exception: the primary image reference, which travels with the fork.
"""

RESERVED_PREFIX = "_"
FORK_META_PREFIX = "_fork_"
PRIMARY_IMAGE_KEY = "_primary_image_id"


def is_reserved_key(key: str) -> bool:
    """Return True if key lives in the reserved namespace."""
    return key.startswith(RESERVED_PREFIX)


def is_copyable_key(key: str) -> bool:
    """Return True if a property with this key is copied into a new fork."""
    if key.startswith(FORK_META_PREFIX):
        return False
    return not is_reserved_key(key) or key == PRIMARY_IMAGE_KEY
