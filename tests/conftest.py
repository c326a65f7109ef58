from typing import Iterator

import httpx
import pytest

from instance_metadata import Client

from .fakes import FakeMetadataService


@pytest.fixture
def service() -> FakeMetadataService:
    return FakeMetadataService()


@pytest.fixture
def http_client(service: FakeMetadataService) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(service.handler)) as c:
        yield c


@pytest.fixture
def client(http_client: httpx.Client) -> Iterator[Client]:
    with Client(http_client=http_client) as c:
        yield c


@pytest.fixture(scope="session")
def identity_document() -> bytes:
    # Sample document as returned by EC2
    return b"""{
  "accountId" : "123456789012",
  "architecture" : "x86_64",
  "availabilityZone" : "us-east-1a",
  "billingProducts" : null,
  "devpayProductCodes" : null,
  "marketplaceProductCodes" : [ "1abc2defghijklm3nopqrs4tu" ],
  "imageId" : "ami-5fb8c835",
  "instanceId" : "i-1234567890abcdef0",
  "instanceType" : "t2.micro",
  "kernelId" : null,
  "pendingTime" : "2016-11-19T16:32:11Z",
  "privateIp" : "10.0.0.5",
  "ramdiskId" : null,
  "region" : "us-east-1",
  "version" : "2017-09-30"
}"""
