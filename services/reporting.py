"""Reporting - writes cluster centers of a result to a caller-visible sink."""


def format_cluster_centers(result, precision=4):
    """Return one line per cluster: id, size and center coordinates."""
    sizes = result.cluster_sizes()
    lines = []
    for cluster_id, center in enumerate(result.centers):
        coords = ", ".join(f"{c:.{precision}f}" for c in center)
        lines.append(f"Cluster {cluster_id} ({sizes[cluster_id]} points): ({coords})")
    return lines


def output_cluster_centers(result, sink=print, precision=4):
    """
    Emit the cluster centers of a result.
    
    Args:
        result: ClusteringResult from a completed run
        sink: Callable taking one line of text (default: print)
        precision: Decimal places per coordinate
    """
    status = "converged" if result.converged else "NOT converged"
    sink(f"{result.n_clusters} cluster centers after {result.n_iter} iterations ({status}):")
    for line in format_cluster_centers(result, precision):
        sink(f"   {line}")
