"""Layout, assembly, querying and export of the certification graph."""
