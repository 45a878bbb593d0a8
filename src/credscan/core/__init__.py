"""Pattern, catalog and scan-aggregation engine."""
