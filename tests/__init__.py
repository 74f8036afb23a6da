# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_loan_terms, make_loan_inputs
"""

from .utils import make_loan_inputs, make_loan_terms

__all__ = ["make_loan_terms", "make_loan_inputs"]
