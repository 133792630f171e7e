"""kubeversions - inventory of pod images and chart versions from Prometheus."""

__version__ = "0.1.0"

# Overridden at build time by the release pipeline.
__commit__ = "unset"
__build_date__ = "unset"

__all__ = ["__build_date__", "__commit__", "__version__"]
