"""Shared utilities for abi_export."""
