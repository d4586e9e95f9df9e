#
#
#

from octodns.provider import ProviderException


class LinodeException(ProviderException):
    pass


class LinodeClientException(LinodeException):
    pass


class LinodeClientNotFound(LinodeClientException):
    def __init__(self):
        super().__init__('Not Found')


class LinodeClientUnauthorized(LinodeClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class ZoneLookupError(LinodeException):
    def __init__(self, zone, reason=None):
        msg = f'could not find domain ID for zone: {zone}'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)
        self.zone = zone


class DomainNotFoundError(ZoneLookupError):
    def __init__(self, zone):
        super().__init__(zone, 'could not find the domain provided')


class RemoteError(LinodeException):
    action = 'call the Linode API'

    def __init__(self, err, zone=None, action=None):
        action = action or self.action
        if zone:
            msg = f'could not {action} for zone {zone}: {err}'
        else:
            msg = f'could not {action}: {err}'
        super().__init__(msg)
        self.zone = zone


class RemoteListError(RemoteError):
    action = 'list domain records'


class RemoteCreateError(RemoteError):
    action = 'create domain record'


class RemoteUpdateError(RemoteError):
    action = 'update domain record'


class RemoteDeleteError(RemoteError):
    action = 'delete domain record'


class InvalidRecordIDError(LinodeException):
    def __init__(self, record_id):
        super().__init__(f'invalid record ID: {record_id!r}')
        self.record_id = record_id
