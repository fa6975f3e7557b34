"""Runnable models of operating-system concepts: atomics, locks, async tasks, page tables and TLBs."""

__version__ = "0.1.0"