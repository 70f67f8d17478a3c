"""numpy pixel kernels shared by the engines.

All kernels take and return numpy arrays and raise ValueError on shape or
dtype mismatches. User-facing validation happens one level up, in the
engines.
"""

from . import color_adjust, convolution, geometric, stylize, tone

__all__ = ['color_adjust', 'convolution', 'geometric', 'stylize', 'tone']
