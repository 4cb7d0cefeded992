"""Graphviz views of mas team reports."""
