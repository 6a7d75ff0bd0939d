"""
API server package: HTTP interface over the resolver and summary builder.

Exposes transaction summaries, curated example digests and a health probe.
"""
