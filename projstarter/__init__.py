"""projstarter -- scaffolds new Go and Vite + Elm projects."""

__version__ = "0.1.0"
