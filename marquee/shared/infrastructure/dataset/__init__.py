from .bundle_loader import BundleLoader

__all__ = ["BundleLoader"]
