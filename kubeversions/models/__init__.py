"""Data models for kubeversions."""
