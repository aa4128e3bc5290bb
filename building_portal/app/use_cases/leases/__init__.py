"""
Lease Use Cases
"""

from .close_out_lease_use_case import CloseOutLeaseUseCase

__all__ = ["CloseOutLeaseUseCase"]
