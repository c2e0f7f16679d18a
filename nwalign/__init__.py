"""
nwalign: global Needleman-Wunsch alignment of DNA sequences with a
linear gap penalty, match percentage and Graphviz export.
"""

__version__ = "0.1.0"

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .aligners import (
    align_global,
    align_with_matrix,
    get_aligned_bases,
)

from .dp_core import (
    AlignInput,
    AlignmentResult,
    fill_score_matrix,
    init_matrix,
    run_nw_dp,
    traceback_alignment,
)

from .alphabet import index_of, encode_sequence, validate_sequence
from .scoring import SubstitutionMatrix
from .identity import alignment_summary, classify_column, match_percentage

from .errors import (
    AlignmentError,
    FileOpenFailure,
    InvalidMatrix,
    InvalidPenalty,
    InvalidSymbol,
    OutputWriteFailure,
    ReconstructionInconsistency,
)


# =============================================================================
# INPUT AND EXPORT
# =============================================================================

from .seqio import parse_gap_penalty, read_sequence, read_substitution_matrix
from .dot import alignment_to_dot, alignment_to_networkx, alignment_to_pydot, write_dot


# =============================================================================
# VALIDATION AND TESTING
# =============================================================================

from .validation import (
    check_alignment_validity,
    check_fill_order_invariance,
    nw_matrix_antidiagonal,
    nw_score_linear_space,
    score_alignment,
)
from .default import get_default_scoring, align_params


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install nwalign[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "nwalign[plot]"'
    )

try:
    from .plot import plot_score_matrix, save_score_matrix_plot
    PLOT_AVAILABLE = True
except ImportError:
    # These will raise ImportError if accessed without matplotlib/seaborn
    def plot_score_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_score_matrix")
    def save_score_matrix_plot(*args, **kwargs):
        raise _missing_plot_dep("save_score_matrix_plot")
    PLOT_AVAILABLE = False


__all__ = [
    "__version__",
    # Core alignment
    "AlignInput",
    "AlignmentResult",
    "align_global",
    "align_with_matrix",
    "get_aligned_bases",
    "fill_score_matrix",
    "init_matrix",
    "run_nw_dp",
    "traceback_alignment",
    # Alphabet and scoring
    "index_of",
    "encode_sequence",
    "validate_sequence",
    "SubstitutionMatrix",
    # Match percentage
    "alignment_summary",
    "classify_column",
    "match_percentage",
    # Errors
    "AlignmentError",
    "FileOpenFailure",
    "InvalidMatrix",
    "InvalidPenalty",
    "InvalidSymbol",
    "OutputWriteFailure",
    "ReconstructionInconsistency",
    # Input and export
    "parse_gap_penalty",
    "read_sequence",
    "read_substitution_matrix",
    "alignment_to_dot",
    "alignment_to_networkx",
    "alignment_to_pydot",
    "write_dot",
    # Validation
    "check_alignment_validity",
    "check_fill_order_invariance",
    "nw_matrix_antidiagonal",
    "nw_score_linear_space",
    "score_alignment",
    "get_default_scoring",
    "align_params",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_score_matrix",
    "save_score_matrix_plot",
]
