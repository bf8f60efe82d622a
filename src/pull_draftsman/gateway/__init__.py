"""Gateways wrapping external processes behind narrow interfaces."""
