#
#
#

"""Mapping between generic records and Linode domain records.

Linode stores record names relative to their domain and TTLs as whole
seconds in ``ttl_sec``; the record value lives in ``target``.
"""

import re
from datetime import timedelta

from .exceptions import InvalidRecordIDError
from .records import Record, relative_name

_RECORD_ID_RE = re.compile(r'[+-]?[0-9]+')


def ttl_seconds(ttl):
    # int() truncates any sub-second part
    return int(ttl.total_seconds())


def params_for_record(zone, record):
    return {
        'type': record.type,
        'name': relative_name(record.name, zone),
        'target': record.value,
        'ttl_sec': ttl_seconds(record.ttl),
    }


def parse_record_id(record):
    if not _RECORD_ID_RE.fullmatch(record.id):
        raise InvalidRecordIDError(record.id)
    return int(record.id)


def merge_remote(zone, existing, remote):
    """Overwrite ``existing`` in place with the fields of a Linode record.

    Fields outside the mapping are left untouched. Returns ``existing``.
    """
    existing.id = str(remote['id'])
    existing.type = remote['type']
    existing.name = relative_name(remote['name'], zone)
    existing.value = remote['target']
    existing.ttl = timedelta(seconds=remote['ttl_sec'])
    return existing


def record_from_remote(zone, remote):
    return merge_remote(zone, Record(), remote)
