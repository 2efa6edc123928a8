def format_info(label, stats):
    """One-line search summary in the spirit of an engine ``info`` line."""
    nps = int(stats.nodes / stats.elapsed) if stats.elapsed > 0 else 0
    result = stats.result.value if stats.result is not None else "-"
    return (f"info {label} result {result} nodes {stats.nodes} hits {stats.cache_hits} "
            f"cutoffs {stats.cutoffs} nps {nps} time {stats.elapsed * 1000:.1f}ms")
