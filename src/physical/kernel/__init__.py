"""Kernel – error hierarchy shared by every other layer."""
