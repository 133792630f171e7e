"""Base controller classes."""

from kubeversions.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
