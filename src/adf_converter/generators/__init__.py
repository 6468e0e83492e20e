"""IR → output format generators."""

from adf_converter.generators.adf_generator import AdfGenerator

__all__ = ["AdfGenerator"]
