"""Network catalog and dispense models (JSON wire format is camelCase)."""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class NetworkCatalogEntry(_WireModel):
    """One supported test network."""

    network_id: str = Field(alias="networkId")
    network_name: str = Field(alias="networkName")
    network_logo: str = Field(alias="networkLogo")
    token_name: str = Field(alias="tokenName")
    drip_amount: str = Field(alias="dripAmount")
    balance: str = "0"

    def has_balance(self) -> bool:
        """True when the faucet still holds funds for this network."""
        try:
            return float(self.balance) > 0
        except ValueError:
            return False


class CatalogCacheRecord(_WireModel):
    """Snapshot of the catalog as stored in the cache."""

    last_synced_at: int = Field(alias="lastSyncedAt")  # epoch milliseconds
    supported_networks: list[NetworkCatalogEntry] = Field(
        default_factory=list, alias="supportedNetworks"
    )


class DripResult(_WireModel):
    """Outcome of a single dispense request."""

    ok: bool
    error: str | None = None
