"""purgectl - Find and purge packages across Flatpak, Snap and APT."""

__version__ = "0.1.0"
