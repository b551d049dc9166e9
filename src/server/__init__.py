"""HTTP API for rendering Markdown with mdblocks."""
