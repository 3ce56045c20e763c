"""
CLI command modules.
"""

from binmerkle_cli.commands import root, prove, verify, update

__all__ = ["root", "prove", "verify", "update"]
