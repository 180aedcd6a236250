"""Runnable demos and a benchmark for EventChains."""
