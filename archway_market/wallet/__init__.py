"""Wallet signers."""
