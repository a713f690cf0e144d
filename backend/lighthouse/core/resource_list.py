"""Codec for the packed resource list stored on a slot.

Resources are stored as one comma-joined string column. The list form is what
callers work with; the string form only exists at the storage boundary.
"""

RESOURCE_DELIMITER = ","


def split_resources(packed: str | None) -> list[str]:
    """Unpack a stored resource string. Never raises.

    An empty or missing value is an empty list, and a value without the
    delimiter is a single resource.
    """
    if not packed:
        return []
    return packed.split(RESOURCE_DELIMITER)


def join_resources(resources: list[str]) -> str:
    """Pack resources for storage. Rejects elements containing the delimiter."""
    for resource in resources:
        if RESOURCE_DELIMITER in resource:
            raise ValueError(f"Resource {resource!r} contains the delimiter {RESOURCE_DELIMITER!r}")
    return RESOURCE_DELIMITER.join(resources)
