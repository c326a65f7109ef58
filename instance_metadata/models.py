from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InstanceIdentity(BaseModel):
    """Represents the signed instance identity document.

    In our case: http://169.254.169.254/latest/dynamic/instance-identity/document

    See: http://docs.aws.amazon.com/AWSEC2/latest/UserGuide/instance-identity-documents.html
    """

    # Allow population using both camelCase and snake_case
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    account_id: str = Field("", alias="accountId")
    architecture: str = ""
    availability_zone: str = Field("", alias="availabilityZone")
    billing_products: str = Field("", alias="billingProducts")
    devpay_product_codes: str = Field("", alias="devpayProductCodes")
    image_id: str = Field("", alias="imageId")
    instance_id: str = Field("", alias="instanceId")
    instance_type: str = Field("", alias="instanceType")
    kernel_id: str = Field("", alias="kernelId")
    pending_time: str = Field("", alias="pendingTime")
    private_ip: str = Field("", alias="privateIp")
    ramdisk_id: str = Field("", alias="ramdiskId")
    region: str = ""
    version: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """The service sends `null` for fields that don't apply (e.g. kernelId)."""
        if v is None:
            return ""
        return v
