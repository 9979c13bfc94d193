"""Reply texts sent by the faucet assistant."""

from ..models import NetworkCatalogEntry

GREETING = "Hey! I can assist you in obtaining testnet tokens."
PROCESSING = (
    "Your testnet tokens are being processed. "
    "Please wait a moment for the transaction to process."
)
RECEIPT_HEADER = "Here's your transaction receipt:"


def network_menu(networks: list[NetworkCatalogEntry]) -> str:
    """List networks split by whether the faucet still has funds for them."""
    with_balance = "\n".join(
        f"- {n.network_id}" for n in networks if n.has_balance()
    )
    without_balance = "\n".join(
        f"- {n.network_id}" for n in networks if not n.has_balance()
    )
    return (
        "Here the options you can choose from "
        "(make sure to copy and paste the name exactly!):\n\n"
        f"✅With Balance:\n{with_balance}\n\n"
        f"❌Without Balance:\n{without_balance}"
    )


def unsupported_network(content: str) -> str:
    return (
        f"❌ I'm sorry, but I don't support {content} at the moment. "
        "Can I assist you with a different testnet?"
    )


def drip_failed(error: str | None) -> str:
    error = error or "unknown error"
    return f'❌ Sorry, there was an error processing your request:\n\n"{error}"'


def receipt_url(base_url: str, network: NetworkCatalogEntry) -> str:
    """Receipt frame link; query values are interpolated as-is."""
    return (
        f"{base_url}?networkLogo={network.network_logo}"
        f"&networkName={network.network_name.replace(' ', '-', 1)}"
        f"&tokenName={network.token_name}"
        f"&amount={network.drip_amount}"
    )


def normalize_network_input(content: str) -> str:
    """Map free text like ' Base Sepolia ' to a network id like 'base_sepolia'."""
    return content.strip().lower().replace(" ", "_", 1)
