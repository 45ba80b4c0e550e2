"""
Shared Infrastructure Module
=============================

Technical adapters for external resources.
"""

# Dataset
from marquee.shared.infrastructure.dataset.bundle_loader import BundleLoader

__all__ = [
    "BundleLoader",
]
