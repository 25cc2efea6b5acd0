"""
Prometheus metrics for monitoring radius query behavior.
"""
from prometheus_client import Counter, Histogram

# Request metrics
radius_queries_total = Counter(
    'radius_queries_total',
    'Total number of radius predicates built',
    ['status']
)

# Latency metrics
radius_query_duration_seconds = Histogram(
    'radius_query_duration_seconds',
    'Time spent building a radius predicate in seconds'
)

# Shape of the generated queries
selected_resolution_total = Counter(
    'selected_resolution_total',
    'Count of radius queries per selected H3 resolution',
    ['resolution']
)

ring_cells_per_query = Histogram(
    'ring_cells_per_query',
    'Number of H3 cells in the k-ring of a radius query',
    buckets=(1, 7, 19, 37, 61, 91, 127, 169, 217, 271, 331)
)

ranges_per_query = Histogram(
    'ranges_per_query',
    'Number of merged compact index ranges in a radius predicate',
    buckets=(1, 2, 4, 8, 16, 32, 64, 128, 256)
)
