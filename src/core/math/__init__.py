"""
Core math modules для инверсии матриц

Gauss-Jordan элиминация до RREF, tolerance-политика и рационализация
результата.
"""

# Tolerance Utilities
from src.core.math.tolerance import (
    # Epsilon constants
    DECIMAL_PLACES,
    EPS_FRACTION,
    EPS_IDENTITY,
    EPS_INTEGER_INPUT,
    EPS_INTEGER_MODE,
    EPS_RATIONALIZE,
    EPS_ROW_OP_SKIP,
    EPS_ROW_OP_SNAP,
    EPS_ZERO,
    MAX_DENOMINATOR,
    # Policy
    DEFAULT_POLICY,
    TolerancePolicy,
    # Functions
    clean_value,
    is_integer_valued,
    is_near_zero,
    is_valid_float,
    snap_to_integer,
    validate_tolerance,
)

# Matrix primitives
from src.core.math.matrix import (
    Matrix,
    MatrixShapeError,
    augment_with_identity,
    copy_matrix,
    identity_matrix,
    is_identity,
    is_square,
    multiply,
    shape,
    split_columns,
)

# Row Operations
from src.core.math.row_operations import add_scaled_row, scale_row, swap_rows

# Pivoting
from src.core.math.pivoting import find_pivot

# RREF Engine
from src.core.math.rref import RrefResult, rref, rref_with_pivots

# Rationalization & Formatting
from src.core.math.rational import (
    DisplayFormat,
    decimal_to_fraction,
    format_matrix,
    format_number,
    rationalize,
)

__all__ = [
    # Tolerance — Epsilon constants
    "DECIMAL_PLACES",
    "EPS_FRACTION",
    "EPS_IDENTITY",
    "EPS_INTEGER_INPUT",
    "EPS_INTEGER_MODE",
    "EPS_RATIONALIZE",
    "EPS_ROW_OP_SKIP",
    "EPS_ROW_OP_SNAP",
    "EPS_ZERO",
    "MAX_DENOMINATOR",
    # Tolerance — Policy
    "DEFAULT_POLICY",
    "TolerancePolicy",
    # Tolerance — Functions
    "clean_value",
    "is_integer_valued",
    "is_near_zero",
    "is_valid_float",
    "snap_to_integer",
    "validate_tolerance",
    # Matrix
    "Matrix",
    "MatrixShapeError",
    "augment_with_identity",
    "copy_matrix",
    "identity_matrix",
    "is_identity",
    "is_square",
    "multiply",
    "shape",
    "split_columns",
    # Row Operations
    "add_scaled_row",
    "scale_row",
    "swap_rows",
    # Pivoting
    "find_pivot",
    # RREF
    "RrefResult",
    "rref",
    "rref_with_pivots",
    # Rationalization & Formatting
    "DisplayFormat",
    "decimal_to_fraction",
    "format_matrix",
    "format_number",
    "rationalize",
]
