"""Adapters - connect the application core to the pod and its auth services."""
