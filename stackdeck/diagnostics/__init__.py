"""Diagnostics for tuning card pools and upgrade balance."""
