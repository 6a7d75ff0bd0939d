"""
Txn Explainer: resolve Sui transaction digests and explain what happened.

Probes mainnet, devnet and testnet in order for a digest, then turns the raw
transaction block into a compact summary: status, sender, gas accounting,
object changes, a plain-language list of actions and one category label.
"""

__version__ = "0.1.0"
