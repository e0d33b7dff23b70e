"""Package operators for removing packages.

This module provides abstract and concrete implementations of package
operators for different package managers (APT, Flatpak, Snap).
"""

from purgectl.operators.apt import AptOperator
from purgectl.operators.base import Operator
from purgectl.operators.flatpak import FlatpakOperator
from purgectl.operators.snap import SnapOperator

__all__ = ["Operator", "AptOperator", "FlatpakOperator", "SnapOperator"]
