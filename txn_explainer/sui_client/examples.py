"""Known transactions for trying the explainer, one per interesting shape."""

from __future__ import annotations

from dataclasses import dataclass

from txn_explainer.sui_client.models import NetworkType


@dataclass(frozen=True)
class ExampleDigest:
    digest: str
    description: str
    network: NetworkType
    features: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "digest": self.digest,
            "description": self.description,
            "network": self.network.value,
            "features": list(self.features),
        }


EXAMPLE_DIGESTS: tuple[ExampleDigest, ...] = (
    ExampleDigest(
        digest="DmVJ3GC8qRpGEkfvTT2T642V95kgFHDeCk2agbpx98w8",
        description="Multi-Network Transaction",
        network=NetworkType.MAINNET,
        features=("Cross-network search", "Gas optimization"),
    ),
    ExampleDigest(
        digest="4epaeL3kiHkT7sukmBDguao5bKqptHnMtKy8vgpCFteo",
        description="Increment",
        network=NetworkType.DEVNET,
        features=("Move calls", "Modified state"),
    ),
    ExampleDigest(
        digest="Gag9pRDipKySckhMpeMdM5FSg4wGhpBy4AzdEDigZ1y2",
        description="DeFi Token Send",
        network=NetworkType.TESTNET,
        features=("Move calls", "Object transfers"),
    ),
    ExampleDigest(
        digest="4eUy2vzkCUxhtp7JCxAZVnDuzPvVqkjC42A4eevKCCdV",
        description="Mint gUSD",
        network=NetworkType.TESTNET,
        features=("Minting",),
    ),
    ExampleDigest(
        digest="FN9ece3HzkSSuBFAbn96wuuw55fKrAMqEsyrLZbwZV5G",
        description="Failed Smart Contract",
        network=NetworkType.MAINNET,
        features=("Multiple modules", "Failed"),
    ),
)
