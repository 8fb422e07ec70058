"""Listfile evaluation components for build-configuration scripts."""
