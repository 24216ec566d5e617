"""A small teaching blockchain: proof-of-work mining of transfer, batch and student chains."""

__version__ = "0.1.0"
__all__ = ["ledger", "transfer", "batch", "students"]