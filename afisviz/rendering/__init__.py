"""Stage renderers and the builders that compose them into vector documents."""
