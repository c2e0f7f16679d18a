"""
Color constants for nwalign plotting.
"""

# =============================================================================
# NUCLEOTIDE COLORS
# =============================================================================

NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # soft warm ochre
    "T": "#C26F6F",  # soft red
    "": "#000000",
}


# =============================================================================
# TRACEBACK PATH COLORS
# =============================================================================

# keyed by the move that entered a path cell
PATH_MOVE_COLORS = dict(
    diag="#2CA02C",   # green
    up="#7F7F7F",     # gray
    left="#7F7F7F",   # gray
    start="#000000",
)


# =============================================================================
# HEATMAP COLORMAPS
# =============================================================================
HEATMAP_COLORMAPS = {
    'default': 'Reds',
    'diverging': 'RdBu_r',
}
