#
#
#

"""Protocol definition for the Linode DNS client interface.

This module defines structural typing (PEP 544) for the remote client the
provider talks to, so tests and alternative transports can stand in for
``LinodeClient`` without inheriting from it.
"""

from typing import Dict, List, Optional, Protocol


class DNSClient(Protocol):
    """Protocol defining the expected interface for Linode DNS clients."""

    def set_token(self, token: str) -> None: ...

    def set_base_url(self, base_url: str) -> None: ...

    def set_api_version(self, api_version: str) -> None: ...

    def domains(self, filter: Optional[Dict] = None) -> List[Dict]:
        """List domains, following every page.

        Args:
            filter: Optional Linode ``X-Filter`` expression, e.g.
                ``{'domain': 'example.com'}``

        Returns:
            List of dicts with at least 'id' and 'domain' keys
        """
        ...

    def domain_records(self, domain_id: int) -> List[Dict]:
        """List all records of a domain.

        Returns:
            List of record dicts with 'id', 'type', 'name', 'target' and
            'ttl_sec' keys
        """
        ...

    def domain_record_create(self, domain_id: int, params: Dict) -> Dict:
        """Create a record and return it as stored by Linode.

        Args:
            domain_id: Domain identifier
            params: Dict with 'type', 'name', 'target' and 'ttl_sec'
        """
        ...

    def domain_record_update(
        self, domain_id: int, record_id: int, params: Dict
    ) -> Dict:
        """Update a record by ID and return it as stored by Linode."""
        ...

    def domain_record_delete(self, domain_id: int, record_id: int) -> None:
        """Delete a record by ID."""
        ...
