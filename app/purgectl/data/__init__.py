"""Bundled data files for purgectl."""
