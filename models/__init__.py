"""Data models for kernels, filter parameters and run results."""

from .kernel import MatrixKernel, BoxBlurKernel, Kernel, named_kernel
from .filter_params import DogParams, KuwaharaParams, DitherParams
from .filter_result import FilterResult
from .run_config import RunConfig

__all__ = [
    'MatrixKernel',
    'BoxBlurKernel',
    'Kernel',
    'named_kernel',
    'DogParams',
    'KuwaharaParams',
    'DitherParams',
    'FilterResult',
    'RunConfig',
]
