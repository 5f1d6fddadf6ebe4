"""hgstatus — classify Mercurial working-copy changes into status groups."""

__version__ = "0.1.0"
