"""Codec package exports."""
from .decoder import decode, decode_shares, encode, parse_base

__all__ = ["decode", "decode_shares", "encode", "parse_base"]
