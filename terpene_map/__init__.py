"""terpene_map package initializer.

This package contains the engine behind the terpene browsing application:
catalog loading, classification, filtering, sorting, the effect hierarchy
used by the sunburst chart and plotting helpers.  See individual module
docstrings for details.
"""
