#
#
#

"""Provider-agnostic DNS record model.

A ``Record`` carries the five fields every DNS provider understands. Names
are relative to the zone they belong to, ``''``/``'@'`` being the apex.
``relative_name`` and ``absolute_name`` are public helpers for moving
between that form and fully-qualified names; the provider itself only needs
``relative_name``, callers building FQDNs from returned records use
``absolute_name``.

The capability protocols describe what a record provider may offer; callers
type against these rather than a concrete provider.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Protocol


@dataclass
class Record:
    type: str = ''
    name: str = ''
    value: str = ''
    ttl: timedelta = field(default_factory=timedelta)
    # Provider-assigned, empty until the record exists remotely
    id: str = ''


def relative_name(fqdn: str, zone: str) -> str:
    """Return ``fqdn`` relative to ``zone``.

    Trailing dots on either argument are ignored, the result never has one.
    Names that are not inside the zone are returned unchanged apart from the
    trailing dot.
    """
    name = fqdn[:-1] if fqdn.endswith('.') else fqdn
    zone = zone[:-1] if zone.endswith('.') else zone
    if zone and name.endswith(zone):
        name = name[: -len(zone)]
    return name[:-1] if name.endswith('.') else name


def absolute_name(name: str, zone: str) -> str:
    """Return the fully-qualified form of a zone-relative ``name``."""
    if not zone:
        return name.strip('.')
    if name in ('', '@'):
        return zone
    if not name.endswith('.'):
        name = f'{name}.'
    return f'{name}{zone}'


class RecordGetter(Protocol):
    def get_records(self, zone: str) -> List[Record]:
        """List all records in ``zone``."""
        ...


class RecordAppender(Protocol):
    def append_records(self, zone: str, records: List[Record]) -> List[Record]:
        """Create ``records`` in ``zone`` and return what was created."""
        ...


class RecordSetter(Protocol):
    def set_records(self, zone: str, records: List[Record]) -> List[Record]:
        """Create or update ``records`` in ``zone``."""
        ...


class RecordDeleter(Protocol):
    def delete_records(self, zone: str, records: List[Record]) -> List[Record]:
        """Delete ``records`` from ``zone`` and return what was deleted."""
        ...


class ZoneLister(Protocol):
    def list_zones(self) -> List[str]:
        """List the names of all zones the provider manages."""
        ...
