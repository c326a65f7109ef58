"""Accessors for the two metadata categories the client knows about."""

import ipaddress
from typing import TYPE_CHECKING, Optional, Union

from .destinations import IntoModel, IntoString
from .models import InstanceIdentity

if TYPE_CHECKING:
    from .client import Client

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

PATH_PUBLIC_HOSTNAME = "/latest/meta-data/public-hostname"
PATH_PUBLIC_IPV4 = "/latest/meta-data/public-ipv4"
PATH_INSTANCE_IDENTITY = "/latest/dynamic/instance-identity/document"


class MetaData:
    """Static instance metadata."""

    def __init__(self, client: "Client") -> None:
        self.client = client

    def public_hostname(self) -> str:
        """Get the public DNS hostname of the instance."""
        return self.client.get(PATH_PUBLIC_HOSTNAME, IntoString())

    def public_ip(self) -> Optional[IPAddress]:
        """Get the public IPv4 address of the instance.

        Returns None if the service answers with something that isn't an
        IP address literal. The text is not trimmed before parsing.
        """
        text = self.client.get(PATH_PUBLIC_IPV4, IntoString())
        try:
            return ipaddress.ip_address(text)
        except ValueError:
            return None


class Dynamic:
    """Dynamic instance data."""

    def __init__(self, client: "Client") -> None:
        self.client = client

    def instance_identity(self) -> InstanceIdentity:
        """Get the instance identity document (account, region, image, ...)."""
        return self.client.get(PATH_INSTANCE_IDENTITY, IntoModel(InstanceIdentity))
