#
#
#

import logging
from dataclasses import replace
from threading import Lock
from typing import Optional

from requests import RequestException

from .clients import DNSClient
from .exceptions import (
    DomainNotFoundError,
    InvalidRecordIDError,
    LinodeClientException,
    LinodeClientNotFound,
    LinodeClientUnauthorized,
    LinodeException,
    RemoteCreateError,
    RemoteDeleteError,
    RemoteError,
    RemoteListError,
    RemoteUpdateError,
    ZoneLookupError,
)
from .records import Record, absolute_name, relative_name
from .translator import (
    merge_remote,
    params_for_record,
    parse_record_id,
    record_from_remote,
)

__version__ = '0.1.0'

__all__ = [
    'LinodeProvider',
    'Record',
    'absolute_name',
    'relative_name',
    'DomainNotFoundError',
    'InvalidRecordIDError',
    'LinodeClientException',
    'LinodeClientNotFound',
    'LinodeClientUnauthorized',
    'LinodeException',
    'RemoteCreateError',
    'RemoteDeleteError',
    'RemoteError',
    'RemoteListError',
    'RemoteUpdateError',
    'ZoneLookupError',
]

# Anything the client or its transport can raise for a failed call
_REMOTE_ERRORS = (LinodeClientException, RequestException)


class LinodeProvider(object):
    '''
    Linode DNS record provider

    linode:
        class: linode_dns.LinodeProvider
        # Personal access token with Domains read/write scope
        api_token: env/LINODE_TOKEN
        # Optional, defaults to https://api.linode.com
        api_url: https://api.linode.com
        # Optional, defaults to v4
        api_version: v4
        # Optional, seconds to wait on each API request, defaults to no limit
        timeout: 30

    Every operation holds a single per-provider lock for its whole duration
    and processes records one at a time. A failure part way through a batch
    leaves the records already applied in place; nothing is rolled back. A
    request that exceeds `timeout` fails like any other remote error.
    '''

    def __init__(
        self,
        api_token=None,
        api_url=None,
        api_version=None,
        timeout=None,
        id='linode',
    ):
        self.log = logging.getLogger(f'LinodeProvider[{id}]')
        self.log.debug(
            '__init__: id=%s, api_token=***, api_url=%s, api_version=%s, '
            'timeout=%s',
            id,
            api_url,
            api_version,
            timeout,
        )
        self.id = id
        self.api_token = api_token
        self.api_url = api_url
        self.api_version = api_version
        self.timeout = timeout

        self._lock = Lock()
        # Created on first use, see _ensure_client
        self._client: Optional[DNSClient] = None

    def _create_client(self):
        from .api_client import LinodeClient

        client = LinodeClient(timeout=self.timeout)
        if self.api_token:
            client.set_token(self.api_token)
        if self.api_url:
            client.set_base_url(self.api_url)
        if self.api_version:
            client.set_api_version(self.api_version)
        return client

    def _ensure_client(self):
        # Callers must hold self._lock
        if self._client is None:
            self.log.debug('_ensure_client: creating client')
            self._client = self._create_client()
        return self._client

    def _domain_id(self, zone):
        name = zone[:-1] if zone.endswith('.') else zone
        try:
            domains = self._client.domains(filter={'domain': name})
        except _REMOTE_ERRORS as e:
            raise ZoneLookupError(zone, f'could not list domains: {e}') from e

        for domain in domains:
            if domain.get('domain') == name:
                self.log.debug(
                    '_domain_id: zone=%s, domain_id=%s', zone, domain['id']
                )
                return domain['id']

        raise DomainNotFoundError(zone)

    def _create(self, zone, domain_id, record):
        params = params_for_record(zone, record)
        try:
            remote = self._client.domain_record_create(domain_id, params)
        except _REMOTE_ERRORS as e:
            raise RemoteCreateError(e, zone) from e
        return record_from_remote(zone, remote)

    def _update(self, zone, domain_id, record):
        record_id = parse_record_id(record)
        params = params_for_record(zone, record)
        try:
            remote = self._client.domain_record_update(
                domain_id, record_id, params
            )
        except _REMOTE_ERRORS as e:
            raise RemoteUpdateError(e, zone) from e
        # Merge into a copy so the caller's record is left as it was
        return merge_remote(zone, replace(record), remote)

    def _delete(self, zone, domain_id, record):
        record_id = parse_record_id(record)
        try:
            self._client.domain_record_delete(domain_id, record_id)
        except _REMOTE_ERRORS as e:
            raise RemoteDeleteError(e, zone) from e

    def _log_partial(self, method, zone, applied, total):
        if applied:
            self.log.warning(
                '%s: zone=%s, aborted after %d of %d records, '
                'applied changes were not rolled back',
                method,
                zone,
                applied,
                total,
            )

    def list_zones(self):
        self.log.debug('list_zones:')
        with self._lock:
            client = self._ensure_client()
            try:
                domains = client.domains()
            except _REMOTE_ERRORS as e:
                raise RemoteListError(e, action='list domains') from e
        return sorted(f'{d["domain"]}.' for d in domains if d.get('domain'))

    def list_records(self, zone):
        self.log.debug('list_records: zone=%s', zone)
        with self._lock:
            client = self._ensure_client()
            domain_id = self._domain_id(zone)
            try:
                remotes = client.domain_records(domain_id)
            except _REMOTE_ERRORS as e:
                raise RemoteListError(e, zone) from e

        records = [record_from_remote(zone, r) for r in remotes]
        self.log.info('list_records:   found %d records', len(records))
        return records

    get_records = list_records

    def append_records(self, zone, records):
        self.log.debug(
            'append_records: zone=%s, len(records)=%d', zone, len(records)
        )
        with self._lock:
            self._ensure_client()
            domain_id = self._domain_id(zone)

            added = []
            try:
                for record in records:
                    # Any ID on the input is ignored, Linode assigns one
                    added.append(self._create(zone, domain_id, record))
            except LinodeException:
                self._log_partial(
                    'append_records', zone, len(added), len(records)
                )
                raise

        self.log.info('append_records:   created %d records', len(added))
        return added

    def set_records(self, zone, records):
        self.log.debug(
            'set_records: zone=%s, len(records)=%d', zone, len(records)
        )
        with self._lock:
            self._ensure_client()
            domain_id = self._domain_id(zone)

            updated = []
            try:
                for record in records:
                    if record.id:
                        updated.append(self._update(zone, domain_id, record))
                    else:
                        updated.append(self._create(zone, domain_id, record))
            except LinodeException:
                self._log_partial(
                    'set_records', zone, len(updated), len(records)
                )
                raise

        self.log.info('set_records:   applied %d records', len(updated))
        return updated

    def delete_records(self, zone, records):
        self.log.debug(
            'delete_records: zone=%s, len(records)=%d', zone, len(records)
        )
        with self._lock:
            self._ensure_client()
            domain_id = self._domain_id(zone)

            deleted = []
            try:
                for record in records:
                    self._delete(zone, domain_id, record)
                    deleted.append(record)
            except LinodeException:
                self._log_partial(
                    'delete_records', zone, len(deleted), len(records)
                )
                raise

        self.log.info('delete_records:   deleted %d records', len(deleted))
        return deleted
