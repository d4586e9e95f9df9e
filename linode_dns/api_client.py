#
#
#

import json
import logging

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import (
    LinodeClientException,
    LinodeClientNotFound,
    LinodeClientUnauthorized,
)


class LinodeClient(object):
    BASE_URL = 'https://api.linode.com'
    API_VERSION = 'v4'
    # Largest page Linode will serve
    PAGE_SIZE = 500

    def __init__(
        self, token=None, base_url=None, api_version=None, timeout=None
    ):
        self.log = logging.getLogger('LinodeClient')
        session = Session()
        session.headers.update(
            {
                'Accept': 'application/json',
                'User-Agent': f'octodns/{octodns_version} linode-dns/{package_version}',
            }
        )
        self._session = session
        self._base_url = self.BASE_URL
        self._api_version = self.API_VERSION
        # Seconds, or a (connect, read) tuple; None waits forever
        self.timeout = timeout

        if token:
            self.set_token(token)
        if base_url:
            self.set_base_url(base_url)
        if api_version:
            self.set_api_version(api_version)

    def set_token(self, token):
        if token:
            self._session.headers['Authorization'] = f'Bearer {token}'
        else:
            self._session.headers.pop('Authorization', None)

    def set_base_url(self, base_url):
        self._base_url = base_url.rstrip('/')

    def set_api_version(self, api_version):
        self._api_version = api_version.strip('/')

    def _url(self, path):
        return f'{self._base_url}/{self._api_version}{path}'

    def _error_message(self, response):
        try:
            errors = response.json().get('errors', [])
            reasons = [e['reason'] for e in errors if e.get('reason')]
        except (ValueError, AttributeError, TypeError, KeyError):
            reasons = []
        if reasons:
            return '; '.join(reasons)
        return f'{response.status_code} {response.reason}'

    def _do(self, method, path, params=None, data=None, headers=None):
        url = self._url(path)
        self.log.debug(
            '_do: method=%s, url=%s, params=%s', method, url, params
        )
        response = self._session.request(
            method,
            url,
            params=params,
            json=data,
            headers=headers,
            timeout=self.timeout,
        )
        if response.status_code == 401:
            raise LinodeClientUnauthorized()
        if response.status_code == 404:
            raise LinodeClientNotFound()
        if response.status_code >= 400:
            raise LinodeClientException(self._error_message(response))
        return response

    def _do_json(self, method, path, params=None, data=None, headers=None):
        return self._do(method, path, params, data, headers).json()

    def _paginated(self, path, headers=None):
        ret = []

        page = 1
        while True:
            params = {'page': page, 'page_size': self.PAGE_SIZE}
            data = self._do_json('GET', path, params, headers=headers)

            ret += data.get('data', [])

            pages = data.get('pages') or 1
            if page >= pages:
                break

            page += 1

        return ret

    def domains(self, filter=None):
        headers = None
        if filter:
            headers = {'X-Filter': json.dumps(filter)}
        return self._paginated('/domains', headers=headers)

    def domain_records(self, domain_id):
        return self._paginated(f'/domains/{domain_id}/records')

    def domain_record_create(self, domain_id, params):
        path = f'/domains/{domain_id}/records'
        return self._do_json('POST', path, data=params)

    def domain_record_update(self, domain_id, record_id, params):
        path = f'/domains/{domain_id}/records/{record_id}'
        return self._do_json('PUT', path, data=params)

    def domain_record_delete(self, domain_id, record_id):
        self._do('DELETE', f'/domains/{domain_id}/records/{record_id}')
