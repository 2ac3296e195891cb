"""
Invoice domain entities with Pydantic v2 validation.

Records travel between the browser, the remote API and the local store as
camelCase JSON. Keys this module does not know about are kept as extras so a
record read back from any store is identical to the one saved.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ClientInfo(BaseModel):
    """Billing client block printed under the invoice header."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    contact: str | None = None
    address: str | None = None
    email: str | None = None
    phone: str | None = None

    @property
    def address_lines(self) -> list[str]:
        """Address split on line breaks with empty lines dropped."""
        if not self.address:
            return []
        return [line for line in self.address.replace("\r\n", "\n").split("\n") if line]


class InvoiceData(BaseModel):
    """Field values rendered onto the template page."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    invoice_number: str = Field(default="", alias="invoiceNumber")
    client: ClientInfo = Field(default_factory=ClientInfo)
    summary: str = ""
    description: str = ""
    date: str | None = None

    def missing_required(self) -> list[str]:
        """Names of required render fields that are empty."""
        missing = []
        if not self.invoice_number:
            missing.append("invoiceNumber")
        if not self.client.name:
            missing.append("client.name")
        return missing


class Invoice(InvoiceData):
    """A persisted invoice record."""

    id: str
    year: int | str | None = None

    def to_record(self) -> dict[str, Any]:
        """Serialize to the wire/storage representation."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Invoice":
        """Build an invoice from its wire/storage representation."""
        return cls.model_validate(record)
